"""
Database module - Generic async MongoDB connection using Beanie ODM.

Provides reusable MongoDB connectivity for any project.

Usage:
    from common.database import MongoDB, set_main_database, get_main_database

    # Set up singleton
    db = MongoDB()
    await db.connect(uri, database_name, models)
    set_main_database(db)

    # Access anywhere
    main_db = get_main_database()
    collection = main_db.get_collection("fastCheckins")
"""

from common.database.mongodb import (
    MongoDB,
    mask_uri,
    # Singleton management
    set_main_database,
    get_main_database,
)

__all__ = [
    "MongoDB",
    "mask_uri",
    # Singleton management
    "set_main_database",
    "get_main_database",
]
