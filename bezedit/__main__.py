import sys

from bezedit.main import main

sys.exit(main())
