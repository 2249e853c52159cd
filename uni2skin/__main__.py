import sys

from uni2skin.cli import main

sys.exit(main())
