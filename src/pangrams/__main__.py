"""Allow running the pangram finder with `python -m pangrams`."""

from pangrams import main

main()
