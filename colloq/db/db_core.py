"""Core database functionality and configuration.

This module provides database management with environment-based
configuration, connection pooling, and session handling.
"""

from contextlib import contextmanager
import logging
from pathlib import Path
from typing import Optional, Dict, Any, Generator
import os

from sqlalchemy import create_engine, Engine, inspect
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import scoped_session, sessionmaker, Session
from sqlalchemy.pool import StaticPool

from ..models import Base
from ..models.event import Event  # noqa
from ..models.registration import Registration  # noqa
from ..models.user import User  # noqa
from ..config.environment import IS_PRODUCTION_ENVIRONMENT

logger = logging.getLogger(__name__)

DEFAULT_SQLITE_PATH = Path(__file__).parent.parent.parent / 'data' / 'colloq.db'

class DatabaseConfig:
    """Database configuration settings."""

    def __init__(
        self,
        database_url: Optional[str] = None,
        sqlite_path: Optional[Path] = None,
        echo: bool = False,
        pool_size: int = 3,
        max_overflow: int = 4,
        pool_timeout: int = 30,
        pool_recycle: int = 3600,
        pool_pre_ping: bool = True
    ):
        """
        Initialize database configuration.

        In production environment, DATABASE_URL must be set in environment variables
        or provided explicitly via database_url parameter.

        Args:
            database_url: Explicit connection URL, overrides the environment
                        (e.g. 'sqlite://' for an in-memory database)
            sqlite_path: Path to SQLite database file (for development)
            echo: Whether to echo SQL statements
            pool_size: Size of the connection pool (permanent connections)
            max_overflow: Maximum number of extra connections to allow temporarily
            pool_timeout: Seconds to wait for an available connection
            pool_recycle: Seconds before connections are recycled
            pool_pre_ping: Whether to ping connections before using them

        Raises:
            ValueError: If in production environment and no database URL is provided
                      either via database_url parameter or DATABASE_URL env variable
        """
        if database_url:
            self.database_url = database_url
        elif IS_PRODUCTION_ENVIRONMENT:
            self.database_url = os.environ.get('DATABASE_URL')
            if not self.database_url:
                raise ValueError(
                    "Database URL must be provided either via database_url parameter "
                    "or DATABASE_URL environment variable when in production environment"
                )
        else:
            self.database_url = f"sqlite:///{sqlite_path or DEFAULT_SQLITE_PATH}"

        self.echo = echo
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_timeout = pool_timeout
        self.pool_recycle = pool_recycle
        self.pool_pre_ping = pool_pre_ping

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith('sqlite')

    @property
    def connection_url(self) -> str:
        """Get the database connection URL, pointing PostgreSQL URLs at psycopg 3."""
        for prefix in ('postgres://', 'postgresql://'):
            if self.database_url.startswith(prefix):
                return 'postgresql+psycopg://' + self.database_url[len(prefix):]
        return self.database_url

    def get_engine_args(self) -> Dict[str, Any]:
        """Get SQLAlchemy engine arguments based on configuration."""
        args = {"echo": self.echo}

        # SQLite-specific configuration
        if self.is_sqlite:
            args["connect_args"] = {
                "check_same_thread": False,
                "detect_types": 3
            }
            args["poolclass"] = StaticPool

        # PostgreSQL-specific configuration
        else:
            args.update({
                "pool_size": self.pool_size,
                "max_overflow": self.max_overflow,
                "pool_timeout": self.pool_timeout,
                "pool_recycle": self.pool_recycle,
                "pool_pre_ping": self.pool_pre_ping
            })

        return args

class DatabaseError(Exception):
    """Base exception for database-related errors."""
    pass

class ConnectionError(DatabaseError):
    """Raised when there are issues connecting to the database."""
    pass

class SessionError(DatabaseError):
    """Raised when there are issues with database sessions."""
    pass

class DuplicateKeyError(DatabaseError):
    """Raised when a write violates a unique constraint."""
    pass

class Database:
    """Core database management class."""

    def __init__(self, config: Optional[DatabaseConfig] = None):
        """Initialize the database manager."""
        self.config = config or DatabaseConfig()
        self.engine: Optional[Engine] = None
        self._session_factory = sessionmaker(expire_on_commit=False)
        self._scoped_session = scoped_session(self._session_factory)
        self._tables_checked = False

        # Initialize engine on creation
        self._setup_engine()

    def _setup_engine(self) -> None:
        """Set up the SQLAlchemy engine."""
        try:
            self.engine = create_engine(
                self.config.connection_url,
                **self.config.get_engine_args()
            )
            self._session_factory.configure(bind=self.engine)
        except Exception as e:
            raise ConnectionError(f"Failed to create database engine: {e}") from e

    def _ensure_sqlite_dir(self) -> None:
        """Create the parent folder of a file-based SQLite database."""
        url = self.config.connection_url
        if url.startswith("sqlite:///") and url != "sqlite:///:memory:":
            Path(url.replace("sqlite:///", "", 1)).parent.mkdir(parents=True, exist_ok=True)

    def init_db(self) -> None:
        """Initialize the database schema."""
        if not self.engine:
            raise ConnectionError("Database engine not initialized")
        self._ensure_sqlite_dir()

        try:
            Base.metadata.create_all(self.engine)
            self._tables_checked = True
            logger.info("Database schema initialized successfully")
        except Exception as e:
            raise DatabaseError(f"Failed to initialize database schema: {e}") from e

    def ensure_tables_exist(self) -> None:
        """Ensure all required database tables exist."""
        if not self._tables_checked:
            if not self.engine:
                raise ConnectionError("Database engine not initialized")
            self._ensure_sqlite_dir()

            try:
                inspector = inspect(self.engine)
                existing_tables = inspector.get_table_names()
                required_tables = set(Base.metadata.tables)

                if not required_tables.issubset(existing_tables):
                    logger.info("Some tables missing, initializing database schema")
                    Base.metadata.create_all(self.engine)
                    logger.info("Database schema initialized successfully")

                self._tables_checked = True

            except Exception as e:
                raise DatabaseError(f"Failed to verify/create database schema: {e}") from e

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Provide a transactional scope around a series of operations.

        This is the preferred way to get a database session. It handles
        commit/rollback automatically and ensures proper cleanup.

        Example:
            with db.session() as session:
                event = session.query(Event).first()
                # No need to call commit - it's handled automatically

        Raises:
            DuplicateKeyError: If a write violates a unique constraint
            SessionError: If there are other issues with the session
            DatabaseError: If database schema verification fails
        """
        # Ensure tables exist before providing a session
        self.ensure_tables_exist()

        session = self._scoped_session()
        try:
            yield session
            session.commit()
        except IntegrityError as e:
            session.rollback()
            raise DuplicateKeyError(f"Duplicate record: {e.orig}") from e
        except Exception as e:
            session.rollback()
            # Application errors pass through untouched
            if not isinstance(e, SQLAlchemyError):
                raise
            raise SessionError(f"Database session error: {e}") from e
        finally:
            session.close()
            self._scoped_session.remove()

    def dispose(self) -> None:
        """Close all pooled connections."""
        if self.engine:
            self.engine.dispose()


# Create the global database instance with default configuration
db = Database()
