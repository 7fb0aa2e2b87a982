import sys

from payments_engine.cli import main

sys.exit(main())
