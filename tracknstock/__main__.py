import sys

from tracknstock.cli import main

sys.exit(main())
