#!/usr/bin/env python3
"""
TASK TRACKER - CLI Interface
============================
Command-line tool for managing a personal task list.

Usage:
    task-tracker add --description "buy milk"
    task-tracker update --id 1 --description "buy oat milk"
    task-tracker mark --id 1 --status done
    task-tracker list --status done
    task-tracker delete --id 1
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from .manager import TaskManager, InvalidStatusError
from .schema import Task, STATUSES
from .storage import TaskStorage, DEFAULT_TASKS_FILE

FILE_ENV_VAR = "TASK_TRACKER_FILE"
USAGE = "expected 'add', 'update', 'delete', 'mark', or 'list' subcommands"


def format_task(task: Task) -> str:
    return (
        f"ID: {task.id}, Description: {task.description}, Status: {task.status.value}, "
        f"CreatedAt: {task.created_at.isoformat()}, UpdatedAt: {task.updated_at.isoformat()}"
    )


def status_filter(value: str) -> str:
    """argparse type for list --status; "" means no filter"""
    if value and value not in STATUSES:
        raise argparse.ArgumentTypeError(
            f"invalid status {value!r} (choose from {', '.join(STATUSES)})"
        )
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="task-tracker",
        description="Task Tracker - personal command-line task list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  task-tracker add --description "buy milk"        Add a task
  task-tracker update --id 1 --description "x"     Change a description
  task-tracker mark --id 1 --status in-progress    Set status
  task-tracker list --status done                  List done tasks
  task-tracker delete --id 1                       Delete a task
        """
    )
    parser.add_argument(
        "--file",
        default=os.environ.get(FILE_ENV_VAR, DEFAULT_TASKS_FILE),
        help=f"Tasks file (default: ${FILE_ENV_VAR} or {DEFAULT_TASKS_FILE})"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # ADD command
    add_parser = subparsers.add_parser("add", help="Add a new task")
    add_parser.add_argument("--description", default="", help="Description of the task")

    # UPDATE command
    update_parser = subparsers.add_parser("update", help="Update a task description")
    update_parser.add_argument("--id", type=int, default=0, help="ID of the task to update")
    update_parser.add_argument("--description", default="", help="New task description")

    # DELETE command
    delete_parser = subparsers.add_parser("delete", help="Delete a task")
    delete_parser.add_argument("--id", type=int, default=0, help="ID of the task to delete")

    # MARK command
    mark_parser = subparsers.add_parser("mark", help="Set a task's status")
    mark_parser.add_argument("--id", type=int, default=0, help="ID of the task to mark")
    mark_parser.add_argument(
        "--status", default="", help=f"New status for the task ({', '.join(STATUSES)})"
    )

    # LIST command
    list_parser = subparsers.add_parser("list", help="List tasks")
    list_parser.add_argument(
        "--status", type=status_filter, default="",
        help=f"Only list tasks with this status ({', '.join(STATUSES)}); empty lists all"
    )
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        print(USAGE)
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    # Initialize manager
    manager = TaskManager(TaskStorage(args.file))

    # Execute command
    if args.command == "add":
        task = manager.add_task(args.description)
        print(f"Task added successfully (ID: {task.id})")

    elif args.command == "update":
        task = manager.update_task(args.id, args.description)
        if task:
            print(f"Task ID {task.id} updated")
        else:
            print(f"Task ID {args.id} not found")

    elif args.command == "delete":
        task = manager.delete_task(args.id)
        if task:
            print(f"Task ID {task.id} deleted")
        else:
            print(f"Task ID {args.id} not found")

    elif args.command == "mark":
        try:
            task = manager.mark_status(args.id, args.status)
        except InvalidStatusError as e:
            print(e)
            return 0
        if task:
            print(f"Task ID {task.id} marked as {task.status.value}")
        else:
            print(f"Task ID {args.id} not found")

    elif args.command == "list":
        tasks = manager.list_tasks(args.status)
        if args.json:
            print(json.dumps([t.to_record() for t in tasks], indent=2, ensure_ascii=False))
        else:
            for task in tasks:
                print(format_task(task))

    return 0


if __name__ == "__main__":
    sys.exit(main())
