import sys

from n8n_cli.cli import main

sys.exit(main())
