import sys

from skyrisk.cli import main

sys.exit(main())
