import sys

from czech_identifiers.cli import main

sys.exit(main())
