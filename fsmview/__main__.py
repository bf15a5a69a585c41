# fsmview/__main__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import sys

from fsmview.cli import main

if __name__ == "__main__":
    sys.exit(main())
