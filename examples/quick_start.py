#!/usr/bin/env python3
# Example usage of flat_json_db: one JSON array file per model type.

import logging
import os

from rich.console import Console
from rich.table import Table

from flat_json_db import Database, JsonModel, identifier, setup_logging

_console = Console()


@identifier("email")
class User(JsonModel):
    pass


def show(db: Database) -> None:
    table = Table(title=os.path.basename(db.path))
    table.add_column("email")
    table.add_column("name")
    table.add_column("age", justify="right")
    for u in db.find_all():
        table.add_row(u.email, getattr(u, "name", ""), str(getattr(u, "age", "")))
    _console.print(table)


def main() -> None:
    setup_logging(logging.INFO)
    base_dir = os.path.join(os.path.dirname(__file__), "data")
    os.makedirs(base_dir, exist_ok=True)
    path = os.path.join(base_dir, "users.json")

    # Creates users.json as [] and a dated backup data/users-YYYY-MM-DD.json
    db = Database(path, User, logs=True, backup_prefix=os.path.join(base_dir, "users-"))

    db.save(User(email="alice@example.com", name="Alice", age=33))
    db.save(User(email="bob@example.com", name="Bob", age=17))
    show(db)

    # Shallow merge: name is kept, age replaced
    db.update(User(email="alice@example.com", age=34))
    db.save_or_update(User(email="carol@example.com", name="Carol", age=41))

    for u in db.find({"age": {"$gte": 18}}):
        _console.print(f"Adult: {u.name} ({u.age})")

    db.delete("bob@example.com")
    show(db)

    # Removes users.json; the dated backup stays
    db.unregister_model()


if __name__ == "__main__":
    main()
