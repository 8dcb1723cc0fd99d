import sys

from avatarme.cli import main

sys.exit(main())
