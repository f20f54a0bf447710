import sys

from qaboard.cli import main

sys.exit(main())
