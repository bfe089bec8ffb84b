"""FastMCP server providing a clock tool, an echo tool and a greeting resource."""

import logging
import sys

from dotenv import load_dotenv
from fastmcp import FastMCP

from simple_mcp_server.config import SERVER_NAME, Settings
from simple_mcp_server.dispatcher import Dispatcher
from simple_mcp_server.resources import register_all_resources
from simple_mcp_server.tools import register_all_tools

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Send diagnostics to stderr; stdout is reserved for the stdio transport."""
    logging.basicConfig(stream=sys.stderr, level=level.upper(), format=LOG_FORMAT)


def create_server(settings: Settings) -> FastMCP:
    """Create the FastMCP instance and register all tools and resources."""
    mcp = FastMCP(SERVER_NAME)
    dispatcher = Dispatcher(settings)

    register_all_tools(mcp, dispatcher)
    register_all_resources(mcp, dispatcher)

    return mcp


def main() -> None:
    """Run the MCP server over stdio, exiting with code 1 on any startup failure."""
    settings = Settings.from_env()

    try:
        configure_logging(settings.log_level)
        # SAMPLE_ENV must be present before any request is served
        settings.require_sample_env()

        logger.info("Starting simple MCP server...")
        mcp = create_server(settings)
        mcp.run()
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except Exception:
        logger.exception("Server initialization error")
        sys.exit(1)


if __name__ == "__main__":
    main()
