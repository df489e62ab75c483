import sys

from .cli.kacheck import main

sys.exit(main())
