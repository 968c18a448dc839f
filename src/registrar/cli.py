"""CLI entry point for Registrar.

One-shot commands run against a directory built from a seed file. The
``shell`` command runs the interactive registration menu.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from registrar.config import DEFAULT_SEED, ConfigError, load_seed
from registrar.directory import CourseListing, Directory, StudentSchedule, Summary
from registrar.logging import get_logger, setup_logging

logger = get_logger("cli")

COURSE_TABLE_WIDTH = 90
SCHEDULE_TABLE_WIDTH = 55
SUMMARY_WIDTH = 40

MENU = """
===== University Registration =====
1. Add a Course
2. Add a Student
3. Register Student for Course
4. Drop Student from Course
5. Display All Courses
6. Display Student Schedule
7. Display System Summary
8. Exit"""


def truncate(text: str, max_length: int) -> str:
    """Shorten text to max_length, marking the cut with '...'."""
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def parse_csv(text: str) -> list[str]:
    """Split a comma-separated list, dropping blanks and case-insensitive repeats."""
    seen: set[str] = set()
    values = []
    for part in text.split(","):
        value = part.strip()
        if value and value.upper() not in seen:
            seen.add(value.upper())
            values.append(value)
    return values


def format_courses(listings: list[CourseListing]) -> str:
    """Render the course table."""
    rule = "-" * COURSE_TABLE_WIDTH
    lines = ["Available Courses", rule]
    if not listings:
        lines.append("No courses available.")
        return "\n".join(lines)

    lines.append(
        f"{'Code':<10}{'Name':<35}{'Cr':>4}{'Enroll':>10}{'Capacity':>10}  Prerequisites"
    )
    lines.append(rule)
    for c in listings:
        prereq = ",".join(c.prerequisites) or "-"
        lines.append(
            f"{c.code:<10}{truncate(c.name, 35):<35}{c.credits:>4}"
            f"{c.enrollment:>10}{c.capacity:>10}  {truncate(prereq, 20)}"
        )
    lines.append(rule)
    return "\n".join(lines)


def format_schedule(schedule: StudentSchedule) -> str:
    """Render a student's schedule table."""
    rule = "-" * SCHEDULE_TABLE_WIDTH
    lines = [f"Schedule for {schedule.name} (ID: {schedule.student_id})", rule]
    if not schedule.entries:
        lines.append("No registered courses.")
        return "\n".join(lines)

    lines.append(f"{'Code':<10}{'Name':<30}{'Credits':>8}")
    lines.append(rule)
    for entry in schedule.entries:
        lines.append(f"{entry.code:<10}{truncate(entry.name, 30):<30}{entry.credits:>8}")
    lines.append(rule)
    lines.append(f"Total Credits: {schedule.total_credits}/{schedule.max_credits}")
    return "\n".join(lines)


def format_summary(summary: Summary) -> str:
    """Render the directory summary."""
    return "\n".join(
        [
            "University System Summary",
            "-" * SUMMARY_WIDTH,
            f"Total Students: {summary.total_students}",
            f"Total Courses : {summary.total_courses}",
            f"Avg Enrollment per Course: {summary.avg_enrollment:.2f}",
        ]
    )


def register_student(directory: Directory, student_id: str, course_code: str) -> bool:
    """Register and print the result. Returns whether it succeeded."""
    outcome = directory.register(student_id, course_code)
    if not outcome.ok:
        click.echo(f"Registration failed: {outcome.error}")
        return False

    student = directory.find_student(student_id)
    limit = f"/{student.max_credits}" if student is not None else ""
    click.echo(f"Registration successful! Total credits: {outcome.data}{limit}.")
    return True


def drop_student(directory: Directory, student_id: str, course_code: str) -> bool:
    """Drop and print the result. Returns whether it succeeded."""
    outcome = directory.drop(student_id, course_code)
    if not outcome.ok:
        click.echo(f"Drop failed: {outcome.error}")
        return False
    click.echo("Course dropped successfully.")
    return True


def show_schedule(directory: Directory, student_id: str) -> bool:
    """Print a student's schedule. Returns whether the student exists."""
    outcome = directory.student_schedule(student_id)
    if not outcome.ok or outcome.data is None:
        click.echo(outcome.error or "Student not found.")
        return False
    click.echo(format_schedule(outcome.data))
    return True


@click.group()
@click.version_option(package_name="registrar")
@click.option(
    "--seed",
    "seed_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="REGISTRAR_SEED",
    help="YAML file with initial courses, students and registrations",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def main(ctx: click.Context, seed_path: Path | None, verbose: bool) -> None:
    """Registrar - course registration for a single university term."""
    setup_logging(level="DEBUG" if verbose else None, console=verbose)

    try:
        seed = load_seed(seed_path) if seed_path is not None else DEFAULT_SEED
        ctx.obj = Directory.from_seed(seed)
    except ConfigError as e:
        logger.error("Could not load seed %s: %s", seed_path or "(default)", e)
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.pass_obj
def courses(directory: Directory) -> None:
    """Display all courses."""
    click.echo(format_courses(directory.list_courses()))


@main.command()
@click.argument("student_id")
@click.pass_obj
def schedule(directory: Directory, student_id: str) -> None:
    """Display a student's schedule."""
    if not show_schedule(directory, student_id):
        sys.exit(1)


@main.command()
@click.pass_obj
def summary(directory: Directory) -> None:
    """Display directory statistics."""
    click.echo(format_summary(directory.summary()))


@main.command()
@click.argument("student_id")
@click.argument("course_code")
@click.pass_obj
def register(directory: Directory, student_id: str, course_code: str) -> None:
    """Register a student for a course."""
    if not register_student(directory, student_id, course_code):
        sys.exit(1)


@main.command()
@click.argument("student_id")
@click.argument("course_code")
@click.pass_obj
def drop(directory: Directory, student_id: str, course_code: str) -> None:
    """Drop a student from a course."""
    if not drop_student(directory, student_id, course_code):
        sys.exit(1)


@main.command()
@click.pass_obj
def shell(directory: Directory) -> None:
    """Run the interactive registration menu."""
    while True:
        click.echo(MENU)
        choice = click.prompt("Select an option (1-8)", default="", show_default=False)
        choice = choice.strip()

        if choice == "1":
            _add_course_prompt(directory)
        elif choice == "2":
            _add_student_prompt(directory)
        elif choice == "3":
            student_id = click.prompt("Enter Student ID").strip()
            course_code = click.prompt("Enter Course Code").strip()
            register_student(directory, student_id, course_code)
        elif choice == "4":
            student_id = click.prompt("Enter Student ID").strip()
            course_code = click.prompt("Enter Course Code").strip()
            drop_student(directory, student_id, course_code)
        elif choice == "5":
            click.echo(format_courses(directory.list_courses()))
        elif choice == "6":
            show_schedule(directory, click.prompt("Enter Student ID").strip())
        elif choice == "7":
            click.echo(format_summary(directory.summary()))
        elif choice == "8":
            break
        else:
            click.echo("Invalid option. Please try again.")


def _add_course_prompt(directory: Directory) -> None:
    code = click.prompt("Enter Course Code (3-10 alphanumeric)").strip()
    name = click.prompt("Enter Course Name").strip()
    credits = click.prompt("Enter Credits (1-4)", type=click.IntRange(1, 4))
    capacity = click.prompt("Enter Max Capacity (10-100)", type=int, default=50)
    prereqs = click.prompt(
        "Enter Prerequisites (comma-separated codes)", default="", show_default=False
    )

    outcome = directory.add_course(code, name, credits, capacity, parse_csv(prereqs))
    if outcome.ok:
        click.echo(f"Course {code} added successfully.")
    else:
        click.echo(f"Error adding course: {outcome.error}")


def _add_student_prompt(directory: Directory) -> None:
    student_id = click.prompt("Enter Student ID (3-10 alphanumeric)").strip()
    name = click.prompt("Enter Name").strip()
    major = click.prompt("Enter Major").strip()
    max_credits = click.prompt("Enter Max Credits (1-24)", type=int, default=18)
    completed = click.prompt(
        "Enter Completed Courses (comma-separated)", default="", show_default=False
    )

    outcome = directory.add_student(student_id, name, major, max_credits, parse_csv(completed))
    if outcome.ok:
        click.echo(f"Student {student_id} added successfully.")
    else:
        click.echo(f"Error adding student: {outcome.error}")


if __name__ == "__main__":
    main()
