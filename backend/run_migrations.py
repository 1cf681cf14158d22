#!/usr/bin/env python3
"""
Schema migration runner.

Applies the SQL files in migrations/ to the Postgres database behind
Supabase, in file-name order, and records each one with a checksum in the
_migrations table.

Usage:
    python run_migrations.py              # Apply pending migrations
    python run_migrations.py --status     # Show applied and pending files
    python run_migrations.py --dry-run    # List what would be applied
    python run_migrations.py --force 001  # Re-apply one migration

Configuration:
    SUPABASE_DB_URL=postgresql://postgres.[project-ref]:[password]@[host]:6543/postgres
"""

import argparse
import hashlib
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import psycopg2
from psycopg2 import sql
from rich.console import Console
from rich.table import Table

from shared.config import get_settings

console = Console()

MIGRATIONS_DIR = Path(__file__).parent / "migrations"
MIGRATIONS_TABLE = "_migrations"


@dataclass(frozen=True)
class Migration:
    """One SQL file under migrations/."""

    name: str
    path: Path
    checksum: str

    def read(self) -> str:
        return self.path.read_text()


def checksum_of(content: str) -> str:
    """Short content hash used to detect edited migrations."""
    return hashlib.sha256(content.encode()).hexdigest()[:16]


def discover_migrations(directory: Path = MIGRATIONS_DIR) -> list[Migration]:
    """All migration files in directory, sorted by name."""
    if not directory.exists():
        return []
    return [
        Migration(name=path.name, path=path, checksum=checksum_of(path.read_text()))
        for path in sorted(directory.glob("*.sql"))
    ]


def plan(
    migrations: list[Migration],
    applied: dict[str, str],
) -> tuple[list[Migration], list[Migration]]:
    """
    Split migrations into pending ones and applied ones that changed since.

    Args:
        migrations: Discovered migration files.
        applied: Name -> checksum of migrations already recorded.

    Returns:
        (pending, modified)
    """
    pending = [m for m in migrations if m.name not in applied]
    modified = [m for m in migrations if m.name in applied and applied[m.name] != m.checksum]
    return pending, modified


def find_by_prefix(migrations: list[Migration], prefix: str) -> Optional[Migration]:
    """
    The single migration whose name starts with prefix.

    Raises:
        ValueError: If more than one migration matches.
    """
    matches = [m for m in migrations if m.name.startswith(prefix)]
    if len(matches) > 1:
        raise ValueError(f"Multiple migrations match '{prefix}': {', '.join(m.name for m in matches)}")
    return matches[0] if matches else None


def connect():
    """Open a connection using SUPABASE_DB_URL, or exit with a message."""
    db_url = get_settings().supabase_db_url
    if not db_url:
        console.print("[red]Error:[/red] SUPABASE_DB_URL is not set.")
        sys.exit(1)

    try:
        return psycopg2.connect(db_url)
    except psycopg2.Error as e:
        console.print(f"[red]Database connection failed:[/red] {e}")
        sys.exit(1)


def ensure_migrations_table(conn) -> None:
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL(
                "CREATE TABLE IF NOT EXISTS {} ("
                " name VARCHAR(255) PRIMARY KEY,"
                " checksum VARCHAR(64) NOT NULL,"
                " applied_at TIMESTAMPTZ NOT NULL DEFAULT NOW())"
            ).format(sql.Identifier(MIGRATIONS_TABLE))
        )
    conn.commit()


def fetch_applied(conn) -> dict[str, tuple[str, object]]:
    """Name -> (checksum, applied_at) for every recorded migration."""
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL("SELECT name, checksum, applied_at FROM {} ORDER BY name").format(
                sql.Identifier(MIGRATIONS_TABLE)
            )
        )
        return {name: (checksum, applied_at) for name, checksum, applied_at in cur.fetchall()}


def apply(conn, migration: Migration) -> None:
    """Run one migration and record it in the same transaction."""
    console.print(f"[blue]Applying[/blue] {migration.name}")
    try:
        with conn.cursor() as cur:
            cur.execute(migration.read())
            cur.execute(
                sql.SQL(
                    "INSERT INTO {} (name, checksum) VALUES (%s, %s) "
                    "ON CONFLICT (name) DO UPDATE SET checksum = EXCLUDED.checksum, applied_at = NOW()"
                ).format(sql.Identifier(MIGRATIONS_TABLE)),
                (migration.name, migration.checksum),
            )
        conn.commit()
    except psycopg2.Error as e:
        conn.rollback()
        console.print(f"[red]Failed[/red] {migration.name}: {e}")
        raise
    console.print(f"[green]Applied[/green] {migration.name}")


def show_status(migrations: list[Migration], applied: dict[str, tuple[str, object]]) -> None:
    table = Table(title="Migrations")
    table.add_column("Migration", style="cyan")
    table.add_column("Status")
    table.add_column("Applied At")
    table.add_column("Checksum")

    checksums = {name: checksum for name, (checksum, _) in applied.items()}
    pending, modified = plan(migrations, checksums)
    pending_names = {m.name for m in pending}
    modified_names = {m.name for m in modified}

    for migration in migrations:
        if migration.name in pending_names:
            table.add_row(migration.name, "[yellow]Pending[/yellow]", "", migration.checksum)
            continue
        _, applied_at = applied[migration.name]
        status = "[red]Modified[/red]" if migration.name in modified_names else "[green]Applied[/green]"
        table.add_row(migration.name, status, str(applied_at or ""), migration.checksum)

    console.print(table)


def main():
    parser = argparse.ArgumentParser(description="Apply DevHub database migrations")
    parser.add_argument("--status", action="store_true", help="Show migration status and exit")
    parser.add_argument("--dry-run", action="store_true", help="List pending migrations without applying them")
    parser.add_argument("--force", metavar="PREFIX", help="Re-apply the migration whose name starts with PREFIX")
    args = parser.parse_args()

    migrations = discover_migrations()
    if not migrations:
        console.print(f"[yellow]No migrations found in {MIGRATIONS_DIR}[/yellow]")
        return

    conn = connect()
    try:
        ensure_migrations_table(conn)
        applied = fetch_applied(conn)

        if args.status:
            show_status(migrations, applied)
            return

        if args.force:
            try:
                migration = find_by_prefix(migrations, args.force)
            except ValueError as e:
                console.print(f"[red]Error:[/red] {e}")
                sys.exit(1)
            if migration is None:
                console.print(f"[red]Error:[/red] No migration matches '{args.force}'")
                sys.exit(1)
            apply(conn, migration)
            return

        pending, modified = plan(migrations, {name: c for name, (c, _) in applied.items()})
        for migration in modified:
            console.print(f"[yellow]Warning:[/yellow] {migration.name} changed after it was applied")

        if not pending:
            console.print("[green]Database is up to date[/green]")
            return

        for migration in pending:
            if args.dry_run:
                console.print(f"[cyan]Would apply[/cyan] {migration.name}")
            else:
                apply(conn, migration)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
