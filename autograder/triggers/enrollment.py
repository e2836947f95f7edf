"""
Default class enrollment for newly created users.

Every row inserted into ``users`` gets exactly one ``user_class`` row for
``DEFAULT_CLASS_NUMBER`` as a non-instructor, written in the same transaction
as the user itself. If that write fails (e.g. the class does not exist) the
user insert fails with it.

Two bindings exist and exactly one is active at a time:

* ``"database"``: a native ``AFTER INSERT ... FOR EACH ROW`` trigger named
  ``TRIGGER_NAME`` (backed by the plpgsql function ``FUNCTION_NAME`` on
  PostgreSQL, inlined on SQLite). Catches every insert, ORM or raw SQL.
* ``"orm"``: a SQLAlchemy ``after_insert`` mapper listener on ``User``. Only
  inserts flushed through the ORM are enrolled.
"""

import logging
from typing import List

from sqlalchemy import DDL, event
from sqlalchemy.engine import Connection, Engine

from autograder.models.user_class import UserClass
from autograder.models.users import User

logger = logging.getLogger("autograder.triggers")

DEFAULT_CLASS_NUMBER = "CSCI1001"
DEFAULT_IS_INSTRUCTOR = False

FUNCTION_NAME = "add_user_to_class"
TRIGGER_NAME = "after_user_insert_test"

HOOK_MODES = ("database", "orm")
TRIGGER_DIALECTS = ("postgresql", "sqlite")


class UnsupportedDialectError(Exception):
    """Raised when a native trigger is requested for a dialect we can't emit DDL for."""

    def __init__(self, dialect_name: str):
        super().__init__(
            f"No enrollment trigger DDL for dialect '{dialect_name}', "
            f"expected one of {', '.join(TRIGGER_DIALECTS)}"
        )
        self.dialect_name = dialect_name


def _class_number_literal() -> str:
    return "'{}'".format(DEFAULT_CLASS_NUMBER.replace("'", "''"))


def enrollment_trigger_ddl(dialect_name: str) -> List[str]:
    """Statements creating the trigger (and its function, where the dialect has them)."""
    if dialect_name == "postgresql":
        is_instructor = "TRUE" if DEFAULT_IS_INSTRUCTOR else "FALSE"
        return [
            f"""CREATE OR REPLACE FUNCTION {FUNCTION_NAME}() RETURNS TRIGGER AS $$
BEGIN
    INSERT INTO user_class (user_id, class_number, is_instructor)
    VALUES (NEW.id, {_class_number_literal()}, {is_instructor});
    RETURN NEW;
END
$$ LANGUAGE plpgsql""",
            f"""CREATE TRIGGER {TRIGGER_NAME}
AFTER INSERT ON users
FOR EACH ROW EXECUTE FUNCTION {FUNCTION_NAME}()""",
        ]
    if dialect_name == "sqlite":
        # sqlite stores booleans as integers
        is_instructor = "1" if DEFAULT_IS_INSTRUCTOR else "0"
        return [
            f"""CREATE TRIGGER {TRIGGER_NAME}
AFTER INSERT ON users
FOR EACH ROW
BEGIN
    INSERT INTO user_class (user_id, class_number, is_instructor)
    VALUES (NEW.id, {_class_number_literal()}, {is_instructor});
END""",
        ]
    raise UnsupportedDialectError(dialect_name)


def drop_trigger_ddl(dialect_name: str) -> List[str]:
    if dialect_name == "postgresql":
        return [
            f"DROP TRIGGER IF EXISTS {TRIGGER_NAME} ON users",
            f"DROP FUNCTION IF EXISTS {FUNCTION_NAME}()",
        ]
    if dialect_name == "sqlite":
        return [f"DROP TRIGGER IF EXISTS {TRIGGER_NAME}"]
    raise UnsupportedDialectError(dialect_name)


def install_enrollment_trigger(connection: Connection) -> None:
    """Create (or recreate) the native trigger. Safe to call repeatedly."""
    dialect_name = connection.dialect.name
    statements = drop_trigger_ddl(dialect_name) + enrollment_trigger_ddl(dialect_name)
    for statement in statements:
        connection.execute(DDL(statement))
    logger.info("Installed trigger %s on users (%s)", TRIGGER_NAME, dialect_name)


def drop_enrollment_trigger(connection: Connection) -> None:
    for statement in drop_trigger_ddl(connection.dialect.name):
        connection.execute(DDL(statement))
    logger.info("Dropped trigger %s", TRIGGER_NAME)


def add_user_to_class(mapper, connection: Connection, target: User) -> User:
    """``after_insert`` listener: enroll the freshly inserted user.

    Runs on the flush's connection, so the enrollment commits or rolls back
    together with the user row. Only ``target.id`` is read.
    """
    connection.execute(
        UserClass.__table__.insert().values(
            user_id=target.id,
            class_number=DEFAULT_CLASS_NUMBER,
            is_instructor=DEFAULT_IS_INSTRUCTOR,
        )
    )
    logger.debug("Enrolled user %s in %s", target.id, DEFAULT_CLASS_NUMBER)
    return target


def is_enrollment_hook_registered() -> bool:
    return event.contains(User, "after_insert", add_user_to_class)


def register_enrollment_hook() -> None:
    if not is_enrollment_hook_registered():
        event.listen(User, "after_insert", add_user_to_class)
        logger.info("Registered ORM enrollment hook on %s", User.__tablename__)


def unregister_enrollment_hook() -> None:
    if is_enrollment_hook_registered():
        event.remove(User, "after_insert", add_user_to_class)
        logger.info("Removed ORM enrollment hook from %s", User.__tablename__)


def activate_enrollment_hook(engine: Engine, mode: str) -> None:
    """Make ``mode`` the only active binding so each user is enrolled exactly once."""
    if mode not in HOOK_MODES:
        raise ValueError(
            f"Unknown enrollment hook mode '{mode}', expected one of {', '.join(HOOK_MODES)}"
        )

    with engine.begin() as connection:
        if mode == "database":
            # Install first so an unsupported dialect leaves the listener in place
            install_enrollment_trigger(connection)
            unregister_enrollment_hook()
        else:
            if connection.dialect.name in TRIGGER_DIALECTS:
                logger.warning(
                    "Dropping trigger %s and function %s: inserts from other "
                    "processes on this database will no longer be enrolled",
                    TRIGGER_NAME,
                    FUNCTION_NAME,
                )
                drop_enrollment_trigger(connection)
            register_enrollment_hook()
