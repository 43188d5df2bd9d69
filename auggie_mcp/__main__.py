import sys

from auggie_mcp.presentation.main import main

sys.exit(main())
