import sys

from autocorrector.cli import main

sys.exit(main())
