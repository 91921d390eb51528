"""CLI entry point — Click command group for the FunLabs learning platform."""

import click

from config import ensure_dirs


@click.group()
def cli():
    """FunLabs - AI learning platform backend and client tools."""
    pass


# ── serve ────────────────────────────────────────────────────────────────
@cli.command()
@click.option("--reload", is_flag=True, default=False, help="Restart on code changes.")
def serve(reload):
    """Start the API server (settings come from the environment / .env)."""
    from backend.run import main

    main(reload=reload)


# ── seed ─────────────────────────────────────────────────────────────────
@cli.command()
@click.option("--reset", is_flag=True, default=False, help="Empty all tables first.")
def seed(reset):
    """Load the demo topics, lessons, questions and achievements."""
    from backend.app.db import build_engine, build_session_factory, init_db
    from backend.config import ServerSettings
    from backend.seed import seed_database

    ensure_dirs()
    settings = ServerSettings.from_env()
    engine = build_engine(settings.database_url)
    init_db(engine)
    session = build_session_factory(engine)()
    try:
        counts = seed_database(session, reset=reset)
    finally:
        session.close()
        engine.dispose()

    click.echo("Database seeded:")
    for table, count in counts.items():
        click.echo(f"  {table:<14} {count}")


# ── resolve-url ──────────────────────────────────────────────────────────
@cli.command("resolve-url")
@click.option("--hostname", default="localhost", show_default=True,
              help="Hostname the client page is served from.")
@click.option("--base-url", default=None, help="Explicit API base URL (overrides everything).")
def resolve_url(hostname, base_url):
    """Show which API base URL a client on HOSTNAME would use."""
    from dataclasses import replace

    from frontend.endpoint import EndpointConfig, describe_environment, resolve_base_url

    config = EndpointConfig.from_env()
    if base_url:
        config = replace(config, explicit_base_url=base_url)
    click.echo(f"Environment: {describe_environment(hostname, config)}")
    click.echo(f"Base URL:    {resolve_base_url(hostname, config)}")


def _client(base_url, origin):
    from frontend.api import ApiClient

    return ApiClient(base_url=base_url, origin=origin)


def _fetch(call):
    from frontend.api import ApiError

    try:
        return call()
    except ApiError as exc:
        raise click.ClickException(str(exc)) from exc


# ── topics ───────────────────────────────────────────────────────────────
@cli.command()
@click.option("--base-url", default=None, help="API base URL (default: resolved).")
@click.option("--origin", default=None, help="Origin header to send, e.g. http://localhost:5173.")
def topics(base_url, origin):
    """List topics and their lessons from the API."""
    client = _client(base_url, origin)
    data = _fetch(client.topics.get_all)
    if not data:
        click.echo("No topics yet. Run 'python cli.py seed' first.")
        return
    for topic in data:
        click.echo(f"\n{topic['orderIndex']}. {topic['name']}")
        for lesson in topic.get("lessons", []):
            click.echo(f"   - {lesson['title']}  [{lesson['difficulty']}]  ({lesson['id']})")
    click.echo()


# ── questions ────────────────────────────────────────────────────────────
@cli.command()
@click.argument("lesson_id")
@click.option("--base-url", default=None, help="API base URL (default: resolved).")
@click.option("--origin", default=None, help="Origin header to send.")
def questions(lesson_id, base_url, origin):
    """List the questions of LESSON_ID."""
    client = _client(base_url, origin)
    data = _fetch(lambda: client.lessons.get_questions(lesson_id))
    if not data:
        click.echo(f"No questions for lesson {lesson_id}.")
        return
    for q in data:
        click.echo(f"{q['orderIndex']:>3}  {q['type']:<16} {q['points']:>3} pts")


# ── signin / signout / whoami ────────────────────────────────────────────
@cli.command()
@click.option("--username", prompt=True)
@click.option("--password", prompt=True, hide_input=True)
def signin(username, password):
    """Sign in with a demo account (demo/demo123, student/student123, ...)."""
    from frontend.auth import AuthSession

    auth = AuthSession()
    if not auth.sign_in(username, password):
        raise click.ClickException("Invalid username or password.")
    user = auth.user
    click.echo(f"Signed in as {user['username']} {user['avatar']}  (level {user['level']})")


@cli.command()
def signout():
    """Forget the signed-in demo user."""
    from frontend.auth import AuthSession

    AuthSession().sign_out()
    click.echo("Signed out.")


@cli.command()
def whoami():
    """Show the signed-in demo user."""
    from frontend.auth import AuthSession

    user = AuthSession().user
    if user is None:
        click.echo("Not signed in.")
        return
    click.echo(
        f"{user['avatar']} {user['username']} <{user['email']}>  "
        f"level {user['level']}  xp {user['xp']}  gems {user['gems']}  hearts {user['hearts']}"
    )


# ── leaderboard ──────────────────────────────────────────────────────────
@cli.command()
@click.option("--limit", default=8, show_default=True, type=click.IntRange(1, 100))
def leaderboard(limit):
    """Show the rankings."""
    from frontend.leaderboard import rank_label, top

    click.echo(f"\n{'Rank':<6} {'Name':<18} {'Points':>7} {'Level':>6} {'Streak':>7}")
    click.echo("-" * 48)
    for entry in top(limit):
        click.echo(
            f"{rank_label(entry['rank']):<6} {entry['name']:<18} "
            f"{entry['points']:>7} {entry['level']:>6} {entry['streak']:>7}"
        )
    click.echo()


if __name__ == "__main__":
    cli()
