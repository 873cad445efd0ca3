"""Test configuration."""

import logfire

# Keep spans local: nothing is exported and the console stays quiet
logfire.configure(send_to_logfire=False, console=False)
