"""CLI commands for curriculum setup.

Command groups:
- languages: define and list programming languages
- profiles: create, list, search, edit, delete and comment on student profiles
- reports: whitelist/blacklist reports and student detail

Data lives under ./data relative to the working directory.
"""

from dataclasses import asdict

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from curriculum.config.app_config import load_app_config
from curriculum.core.errors import (
    CurriculumError,
    ProfileNotFoundError,
    StorageError,
)
from curriculum.core.models import StudentProfile
from curriculum.core.reports import ReportKind
from curriculum.core.roster import ProfileDraft, Roster
from curriculum.core.search import ProfileFilter

app = typer.Typer(
    name="curriculum",
    help="Define programming languages and manage student profiles.",
    no_args_is_help=True,
)
languages_app = typer.Typer(help="Programming language definitions.", no_args_is_help=True)
profiles_app = typer.Typer(help="Student profiles.", no_args_is_help=True)
reports_app = typer.Typer(help="Whitelist and blacklist reports.", no_args_is_help=True)

app.add_typer(languages_app, name="languages")
app.add_typer(profiles_app, name="profiles")
app.add_typer(reports_app, name="reports")

console = Console()


def _error(message: str) -> None:
    console.print(f"[red]✗ {escape(message)}[/red]")


def _load_roster_or_exit() -> Roster:
    """Load languages and profiles, or exit with a retry message."""
    try:
        return Roster.from_config(load_app_config())
    except StorageError as e:
        _error(f"{e}. Please try again.")
        raise typer.Exit(code=1)


def _fail(e: CurriculumError, action: str) -> None:
    """Report a failed operation and exit."""
    if isinstance(e, StorageError):
        _error(f"Unable to {action}. Please try again.")
    else:
        _error(str(e))
    raise typer.Exit(code=1)


def _profiles_table(profiles: list[StudentProfile], title: str) -> Table:
    table = Table(title=title, show_lines=True)
    table.add_column("Name", style="bold")
    table.add_column("Status")
    table.add_column("Job Status")
    table.add_column("Job Details")
    table.add_column("Role")
    table.add_column("Languages")
    table.add_column("Databases")
    table.add_column("Whitelist")
    table.add_column("Blacklist")
    for p in profiles:
        table.add_row(
            escape(p.full_name),
            escape(p.academic_status),
            p.job_status_label,
            escape(p.job_details_display),
            escape(p.preferred_role),
            escape(p.format_languages()),
            escape(p.format_databases()),
            p.whitelist_label,
            p.blacklist_label,
        )
    return table


# =============================================================================
# LANGUAGES
# =============================================================================


@languages_app.command("add")
def add_language(
    name: str = typer.Argument(..., help="Language name, e.g. 'Python'"),
) -> None:
    """Define a new programming language."""
    roster = _load_roster_or_exit()
    try:
        language = roster.add_language(name)
    except CurriculumError as e:
        _fail(e, "store language")

    console.print(f"[green]✓ Saved programming language: {escape(language.name)}[/green]")


@languages_app.command("list")
def list_languages() -> None:
    """List defined programming languages."""
    roster = _load_roster_or_exit()

    if not roster.languages:
        console.print("[yellow]No programming languages defined yet[/yellow]")
        console.print("  Use: curriculum languages add <name>")
        return

    console.print(f"\n[bold]Programming languages ({len(roster.languages)}):[/bold]\n")
    for language in roster.languages:
        console.print(f"  {escape(language.name)}")


# =============================================================================
# PROFILES
# =============================================================================


@profiles_app.command("add")
def add_profile(
    name: str = typer.Option(..., "--name", "-n", help="Student full name"),
    status: str = typer.Option(..., "--status", "-s", help="Academic status"),
    employed: bool = typer.Option(
        False, "--employed/--not-employed", help="Job status (default: not employed)"
    ),
    job: str = typer.Option("", "--job", "-j", help="Job details (required if employed)"),
    language: list[str] | None = typer.Option(
        None, "--language", "-l", help="Programming language (repeatable)"
    ),
    database: list[str] | None = typer.Option(
        None, "--database", "-d", help="Database (repeatable)"
    ),
    role: str = typer.Option(..., "--role", "-r", help="Preferred professional role"),
    comment: list[str] | None = typer.Option(
        None, "--comment", "-c", help="Initial comment, date-stamped (repeatable)"
    ),
    whitelist: bool = typer.Option(False, "--whitelist", help="Mark for the whitelist"),
    blacklist: bool = typer.Option(False, "--blacklist", help="Mark for the blacklist"),
) -> None:
    """Create a new student profile."""
    roster = _load_roster_or_exit()

    draft = ProfileDraft(
        full_name=name,
        academic_status=status,
        employed=employed,
        job_details=job,
        programming_languages=list(language or []),
        databases=list(database or []),
        preferred_role=role,
        whitelist=whitelist,
        blacklist=blacklist,
    )

    try:
        draft.comments = [roster.stamped_comment(text) for text in comment or []]
        profile = roster.add_profile(draft)
    except CurriculumError as e:
        _fail(e, "save profile")

    console.print(f"[green]✓ Profile saved successfully: {escape(profile.full_name)}[/green]")


@profiles_app.command("list")
def list_profiles() -> None:
    """Show all stored profiles."""
    roster = _load_roster_or_exit()

    if not roster.profiles:
        console.print("[yellow]No stored profiles yet. Save a profile to populate the table.[/yellow]")
        return

    console.print(_profiles_table(roster.profiles, f"Student profiles ({len(roster.profiles)})"))
    skipped = roster.profile_repository.last_skipped
    if skipped:
        console.print(f"[yellow]⚠ {skipped} unreadable record(s) were skipped[/yellow]")


@profiles_app.command("show")
def show_profile(
    name: str = typer.Argument(..., help="Student full name (case-insensitive)"),
) -> None:
    """Show every field of one profile."""
    roster = _load_roster_or_exit()
    try:
        profile = roster.get_profile(name)
    except ProfileNotFoundError as e:
        _fail(e, "load profile")

    for key, value in asdict(profile).items():
        if key == "comments":
            continue
        if isinstance(value, list):
            value = ", ".join(value)
        console.print(f"  [dim]{key}:[/dim] {escape(str(value))}")

    console.print("  [dim]comments:[/dim]")
    if not profile.comments:
        console.print("    [yellow]No comments recorded yet.[/yellow]")
        return
    for line in profile.format_comments().splitlines():
        console.print(f"    {escape(line)}")


@profiles_app.command("search")
def search_profiles(
    name: str | None = typer.Option(None, "--name", "-n", help="Name contains"),
    status: str | None = typer.Option(None, "--status", "-s", help="Academic status"),
    language: str | None = typer.Option(None, "--language", "-l", help="Knows language"),
    database: str | None = typer.Option(None, "--database", "-d", help="Knows database"),
    role: str | None = typer.Option(None, "--role", "-r", help="Preferred role"),
) -> None:
    """Filter profiles; every given criterion must match."""
    roster = _load_roster_or_exit()
    matches = roster.search(
        ProfileFilter(name=name, status=status, language=language, database=database, role=role)
    )

    if not matches:
        console.print("[yellow]No profiles matched your filters.[/yellow]")
        return

    console.print(_profiles_table(matches, "Search results"))
    console.print(f"[green]Showing {len(matches)} profile(s).[/green]")


@profiles_app.command("edit")
def edit_profile(
    original_name: str = typer.Argument(..., help="Current full name of the profile"),
    name: str | None = typer.Option(None, "--name", "-n", help="New full name"),
    status: str | None = typer.Option(None, "--status", "-s", help="Academic status"),
    employed: bool | None = typer.Option(
        None, "--employed/--not-employed", help="Job status"
    ),
    job: str | None = typer.Option(None, "--job", "-j", help="Job details"),
    language: list[str] | None = typer.Option(
        None, "--language", "-l", help="Replace languages (repeatable)"
    ),
    database: list[str] | None = typer.Option(
        None, "--database", "-d", help="Replace databases (repeatable)"
    ),
    role: str | None = typer.Option(None, "--role", "-r", help="Preferred role"),
    whitelist: bool | None = typer.Option(None, "--whitelist/--no-whitelist"),
    blacklist: bool | None = typer.Option(None, "--blacklist/--no-blacklist"),
) -> None:
    """Edit a stored profile. Omitted options keep their current value."""
    roster = _load_roster_or_exit()
    try:
        current = roster.get_profile(original_name)
    except ProfileNotFoundError as e:
        _fail(e, "load profile")

    # Selecting one list clears the other, as the form checkboxes do
    if whitelist and blacklist is None:
        blacklist = False
    if blacklist and whitelist is None:
        whitelist = False

    draft = ProfileDraft(
        full_name=name if name is not None else current.full_name,
        academic_status=status if status is not None else current.academic_status,
        employed=employed if employed is not None else current.employed,
        job_details=job if job is not None else current.job_details,
        programming_languages=list(language) if language else list(current.programming_languages),
        databases=list(database) if database else list(current.databases),
        preferred_role=role if role is not None else current.preferred_role,
        whitelist=whitelist if whitelist is not None else current.whitelist,
        blacklist=blacklist if blacklist is not None else current.blacklist,
    )

    try:
        updated = roster.update_profile(current.full_name, draft)
    except CurriculumError as e:
        _fail(e, "save changes")

    console.print(f"[green]✓ Updated profile for {escape(updated.full_name)}.[/green]")


@profiles_app.command("delete")
def delete_profile(
    name: str = typer.Argument(..., help="Full name of the profile to delete"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
) -> None:
    """Delete a stored profile."""
    roster = _load_roster_or_exit()
    profile = roster.find_profile(name)
    if profile is None:
        _error("Profile not found in storage. Refresh and try again.")
        raise typer.Exit(code=1)

    if not yes:
        if not typer.confirm(f"Delete the profile for {profile.full_name}?"):
            console.print("[yellow]Cancelled[/yellow]")
            raise typer.Exit(code=0)

    try:
        roster.delete_profile(profile.full_name)
    except ProfileNotFoundError:
        _error("Profile not found in storage. Refresh and try again.")
        raise typer.Exit(code=1)
    except StorageError as e:
        _fail(e, "delete the profile")

    console.print(f"[green]✓ Deleted profile for {escape(profile.full_name)}.[/green]")


@profiles_app.command("comment")
def add_comment(
    name: str = typer.Argument(..., help="Student full name"),
    text: str = typer.Argument(..., help="Comment text (stamped with today's date)"),
) -> None:
    """Append a dated comment to a profile."""
    roster = _load_roster_or_exit()
    try:
        profile = roster.add_comment(name, text)
    except CurriculumError as e:
        _fail(e, "save the comment")

    console.print(f"[green]✓ Added comment for {escape(profile.full_name)}.[/green]")
    console.print(f"  [dim]{escape(profile.comments[-1])}[/dim]")


@profiles_app.command("comments")
def list_comments(
    name: str = typer.Argument(..., help="Student full name"),
) -> None:
    """Show the comment history of a profile."""
    roster = _load_roster_or_exit()
    try:
        profile = roster.get_profile(name)
    except ProfileNotFoundError as e:
        _fail(e, "load profile")

    console.print(f"\n[bold]{escape(profile.full_name)}[/bold]\n")
    if not profile.comments:
        console.print("[yellow]No comments recorded yet.[/yellow]")
        return
    console.print(escape(profile.format_comments()))


# =============================================================================
# REPORTS
# =============================================================================


def _print_report(kind: ReportKind) -> None:
    roster = _load_roster_or_exit()
    flagged = roster.report(kind)

    if not flagged:
        console.print("[yellow]No students found for the selected report.[/yellow]")
        return

    table = Table(title=f"{kind.label} report")
    table.add_column("Name", style="bold")
    table.add_column("Status")
    table.add_column("Role")
    table.add_column("Flag")
    for p in flagged:
        table.add_row(
            escape(p.full_name), escape(p.academic_status), escape(p.preferred_role), p.flag_label
        )
    console.print(table)
    console.print(f"Showing {len(flagged)} student(s) marked as {kind.label}.")


@reports_app.command("whitelist")
def whitelist_report() -> None:
    """Students marked for the whitelist."""
    _print_report(ReportKind.WHITELIST)


@reports_app.command("blacklist")
def blacklist_report() -> None:
    """Students marked for the blacklist."""
    _print_report(ReportKind.BLACKLIST)


@reports_app.command("show")
def report_detail(
    name: str = typer.Argument(..., help="Student full name"),
    full: bool = typer.Option(False, "--full", help="Print full comment text"),
) -> None:
    """Detail of one student with dated comment history."""
    roster = _load_roster_or_exit()
    try:
        detail = roster.detail(name)
    except ProfileNotFoundError as e:
        _fail(e, "open detail view")

    console.print(f"\n[bold]{escape(detail.full_name)}[/bold]")
    console.print(f"  [dim]status:[/dim]    {detail.academic_status}")
    console.print(f"  [dim]job:[/dim]       {detail.job_status} {escape(detail.job_details)}".rstrip())
    console.print(f"  [dim]languages:[/dim] {escape(detail.languages)}")
    console.print(f"  [dim]databases:[/dim] {escape(detail.databases)}")
    console.print(f"  [dim]role:[/dim]      {escape(detail.preferred_role)}")
    console.print(f"  [dim]flag:[/dim]      {detail.flag}")

    if not detail.comments:
        console.print("\n[yellow]No comments recorded.[/yellow]")
        return

    table = Table(title="Comments")
    table.add_column("Date", no_wrap=True)
    table.add_column("Comment", overflow="fold")
    for entry in detail.comments:
        table.add_row(escape(entry.date), escape(entry.full_text if full else entry.preview))
    console.print(table)


if __name__ == "__main__":
    app()
