#!/usr/bin/env python3

import argparse
import logging
import sys
from pathlib import Path

# Add project root to Python path
sys.path.append(str(Path(__file__).parent.parent))

from colloq.db import db
from colloq.models import Event, Registration

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def clear_all_events(registrations_only: bool = False):
    """Clear all registrations and, unless asked not to, all events from the database"""
    # Initialize database
    db.init_db()
    
    with db.session() as session:
        count = session.query(Registration).delete()
        logger.info(f"Cleared {count} registrations from database")
        if registrations_only:
            return
        # Delete all events
        count = session.query(Event).delete()
        logger.info(f"Cleared {count} events from database")

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Delete every event and registration from the database")
    parser.add_argument(
        "--registrations-only",
        action="store_true",
        help="Only clear registrations, keep the events"
    )
    args = parser.parse_args()
    clear_all_events(registrations_only=args.registrations_only)
