#!/usr/bin/env python3
"""Prefix router bot (Discord).

Routes ``!``, ``$`` and ``%``/``％`` prefixed messages to canned responders.
"""

import sys

from prefixbot.adapters.discord.launcher import main

if __name__ == "__main__":
    sys.exit(main())
