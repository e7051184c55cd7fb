import sys

from mercury.cli import main

sys.exit(main())
