import sys

from kv_hooks.cli import main

sys.exit(main())
