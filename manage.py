#!/usr/bin/env python3
"""
Studio CLI — maintenance commands.

Usage:
    python manage.py create-user
    python manage.py orphans

create-user reads STUDIO_USER_EMAIL, STUDIO_USER_PASSWORD and
STUDIO_USER_NAME from env vars (or .env file). If the user exists, resets
their password and re-activates the account; otherwise creates it.

orphans lists gallery posts whose source project has been deleted. It only
reports; nothing is removed.
"""

import os
import sys

from dotenv import load_dotenv


def upsert_user(email, password, name='Studio User'):
    """Create or reset a local account. Returns (user, created)."""
    from app.services.account_service import account_service

    return account_service.upsert(email, password, name)


def find_orphaned_posts():
    """Return posts whose project_id no longer matches a project."""
    from sqlalchemy import select
    from app.models import Post, Project

    known = select(Project.id)
    return (
        Post.query
        .filter(Post.project_id.not_in(known))
        .order_by(Post.created_at.desc())
        .all()
    )


def create_user():
    """Create or reset a local account from env vars."""
    load_dotenv()

    email = os.getenv('STUDIO_USER_EMAIL')
    password = os.getenv('STUDIO_USER_PASSWORD')
    name = os.getenv('STUDIO_USER_NAME', 'Studio User')

    if not email or not password:
        print("❌ STUDIO_USER_EMAIL and STUDIO_USER_PASSWORD must be set.")
        print("   Set them in your environment or .env file and retry.")
        sys.exit(1)

    if len(password) < 8:
        print("❌ STUDIO_USER_PASSWORD must be at least 8 characters.")
        sys.exit(1)

    from app import create_app
    app = create_app()

    with app.app_context():
        user, created = upsert_user(email, password, name)
        if created:
            print(f"✅ Account created for {user.email}")
        else:
            print(f"✅ Password reset and account re-activated for {user.email}")


def orphans():
    """Print posts that outlived their source project."""
    load_dotenv()

    from app import create_app
    app = create_app()

    with app.app_context():
        posts = find_orphaned_posts()
        if not posts:
            print("No orphaned posts.")
            return
        for post in posts:
            print(f"{post.id}  project={post.project_id}  owner={post.owner_id}  {post.title}")
        print(f"{len(posts)} orphaned post(s).")


COMMANDS = {
    'create-user': create_user,
    'orphans': orphans,
}


def main():
    if len(sys.argv) < 2:
        print("Usage: python manage.py <command>")
        print("Commands:")
        print("  create-user   Create or reset a local account from env vars")
        print("  orphans       List posts whose source project was deleted")
        sys.exit(1)

    command = COMMANDS.get(sys.argv[1])
    if command is None:
        print(f"❌ Unknown command: {sys.argv[1]}")
        sys.exit(1)
    command()


if __name__ == '__main__':
    main()
