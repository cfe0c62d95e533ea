import sys
import logging
from pathlib import Path

from gallery.cli import run_menu
from gallery.config import settings
from gallery.utils import setup_logging

def main():
    # Initialize settings
    project_root = Path(__file__).parent
    settings.initialize_paths(project_root)

    # Setup logging with configured level
    setup_logging(settings.logs_dir, settings.log_level)
    logging.getLogger("gallery").collection(f"Using collection file {settings.data_file}")

    try:
        run_menu(settings)
    except KeyboardInterrupt:
        logging.getLogger("gallery").info("Gallery session interrupted by user")
        sys.exit(0)

if __name__ == "__main__":
    main()
