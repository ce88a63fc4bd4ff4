#!/usr/bin/env python3
"""
Sprite Atlas Prep - Command Line Application
Packs sprite images into a texture atlas with a JSON layout.
"""

import sys

from sprite_atlas_core.cli import main

if __name__ == "__main__":
    sys.exit(main())
