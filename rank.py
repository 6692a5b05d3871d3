#!/usr/bin/env python3
"""
rank.py — Convenience entry point for VenueRank.
Usage: python rank.py resolve "IEEE Transactions on Software Engineering" --debug

This simply delegates to venuerank.main.main(). All arguments are passed through.
"""
from venuerank.main import main

if __name__ == "__main__":
    main()
