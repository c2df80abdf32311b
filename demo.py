from __future__ import annotations

import logging

from docstore import Database, get_settings

logger = logging.getLogger(__name__)


def _check(ok: bool, message: str) -> None:
    if not ok:
        raise RuntimeError(f"demo check failed: {message}")


def run_demo(db: Database) -> None:
    db.clear_db()
    db.create_collection("users")

    for name in ("John", "Maria", "Peter", "Jack"):
        db.add_one("users", {"name": name})

    all_users = db.get_all("users")
    _check(len(all_users) == 4, f"expected 4 users, got {len(all_users)}")

    second_id = all_users[1]["id"]
    one_user = db.get_one("users", second_id)
    _check(one_user is not None and one_user["id"] == second_id, f"lookup of {second_id} returned {one_user!r}")

    logger.info("All users: %s", all_users)
    logger.info("User by id: %s", one_user)

    db.remove_one("users", second_id)
    removed = db.get_one("users", second_id)
    _check(removed is None, f"{second_id} still present after removal")
    remaining = len(db.get_all("users"))
    _check(remaining == 3, f"expected 3 users after removal, got {remaining}")

    logger.info("After removal: %s", removed)


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    db = Database.from_settings(settings)
    run_demo(db)


if __name__ == "__main__":
    main()
