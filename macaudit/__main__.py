import sys

from macaudit.cli import main

sys.exit(main())
