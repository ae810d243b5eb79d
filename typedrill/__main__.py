import sys

from typedrill.main import main

sys.exit(main())
