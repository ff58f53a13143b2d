#!/usr/bin/env python3
"""chkd CLI entrypoint."""

import sys
import argparse
import logging
from pathlib import Path

from chkd.lib.config import find_repo_root, load_spec_config
from chkd.lib.locking import LockTimeout
from chkd.lib.validate import PayloadError
from chkd.spec.errors import SpecError
from chkd.commands import add as cmd_add_module
from chkd.commands import check as cmd_check_module
from chkd.commands import edit as cmd_edit_module
from chkd.commands import mark as cmd_mark_module
from chkd.commands import move as cmd_move_module
from chkd.commands import status as cmd_status_module


def get_spec_config(args):
    """Load repo config from --repo (or the nearest repo above cwd), apply --spec."""
    repo = Path(args.repo) if args.repo else find_repo_root(Path.cwd())
    try:
        config = load_spec_config(repo)
    except ValueError as e:
        print(f"ERROR: Invalid .chkd/chkd.env: {e}")
        sys.exit(2)

    if args.spec:
        config.spec_path = Path(args.spec)

    if not config.spec_path.exists():
        print(f"ERROR: Spec file not found: {config.spec_path}")
        print("Create docs/SPEC.md, set SPEC_PATH in .chkd/chkd.env, or pass --spec.")
        sys.exit(2)

    return config


def run(handler, args) -> int:
    """Run a command, turning engine errors into `ERROR:` output and exit code 1."""
    config = get_spec_config(args)
    try:
        return handler(args, config)
    except (SpecError, PayloadError, LockTimeout, ValueError, FileNotFoundError) as e:
        print(f"ERROR: {e}")
        return 1


def cmd_status(args):
    return run(cmd_status_module.cmd_status, args)


def cmd_search(args):
    return run(cmd_status_module.cmd_search, args)


def cmd_mark(args):
    return run(cmd_mark_module.cmd_mark, args)


def cmd_add(args):
    return run(cmd_add_module.cmd_add, args)


def cmd_add_child(args):
    return run(cmd_add_module.cmd_add_child, args)


def cmd_edit(args):
    return run(cmd_edit_module.cmd_edit, args)


def cmd_story(args):
    return run(cmd_edit_module.cmd_story, args)


def cmd_priority(args):
    return run(cmd_edit_module.cmd_priority, args)


def cmd_tags(args):
    return run(cmd_edit_module.cmd_tags, args)


def cmd_delete(args):
    return run(cmd_move_module.cmd_delete, args)


def cmd_clean(args):
    return run(cmd_move_module.cmd_clean, args)


def cmd_move(args):
    return run(cmd_move_module.cmd_move, args)


def cmd_transfer(args):
    return run(cmd_move_module.cmd_transfer, args)


def cmd_tbc(args):
    return run(cmd_check_module.cmd_tbc, args)


def cmd_validate(args):
    return run(cmd_check_module.cmd_validate, args)


def cmd_repair(args):
    return run(cmd_check_module.cmd_repair, args)


def cmd_duplicates(args):
    return run(cmd_check_module.cmd_duplicates, args)


def build_parser():
    parser = argparse.ArgumentParser(prog='chkd', description='Spec checklist CLI')
    parser.add_argument('--repo', '-r', help='Repository root (default: nearest with .chkd/ or docs/SPEC.md)')
    parser.add_argument('--spec', '-s', help='Spec file (overrides SPEC_PATH)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log engine activity to stderr')
    subparsers = parser.add_subparsers(dest='command', required=True)

    # chkd status
    p_status = subparsers.add_parser('status', help='Show areas and items')
    p_status.add_argument('--area', '-a', help='Only this area code')
    p_status.add_argument('--all', action='store_true', help='Show sub-items too')
    p_status.add_argument('--open', action='store_true', help='Hide done items')
    p_status.add_argument('--ids', action='store_true', help='Show item ids')
    p_status.set_defaults(func=cmd_status)

    # chkd search
    p_search = subparsers.add_parser('search', help='Find items by title, description or id')
    p_search.add_argument('query', help='Text to search for')
    p_search.set_defaults(func=cmd_search)

    # chkd tick / untick / start / skip / unskip / block / unblock
    for action, help_text in (
        ('tick', 'Mark item done'),
        ('untick', 'Reopen a done item'),
        ('start', 'Mark item in progress'),
        ('skip', 'Skip item'),
        ('unskip', 'Restore a skipped item'),
        ('block', 'Mark item blocked'),
        ('unblock', 'Clear a blocked item'),
    ):
        p_mark = subparsers.add_parser(action, help=help_text)
        p_mark.add_argument('query', help='Item id or part of its title')
        if action in cmd_mark_module.SCOPED_ACTIONS:
            p_mark.add_argument('--within', help='Prefer matches under this parent item id')
        p_mark.set_defaults(func=cmd_mark, action=action)

    # chkd add
    p_add = subparsers.add_parser('add', help='Add a top-level item to an area')
    p_add.add_argument('title', nargs='?', help='Item title (without section number)')
    p_add.add_argument('--area', '-a', help='Area code, e.g. FE')
    p_add.add_argument('--description', '-d', help='One-line description')
    p_add.add_argument('--story', help='User story quote')
    p_add.add_argument('--requirement', action='append', help='Key requirement (repeatable)')
    p_add.add_argument('--file', action='append', help='File to change (repeatable)')
    p_add.add_argument('--test', action='append', help='Testing note (repeatable)')
    p_add.add_argument('--link', help='Link to a design doc')
    p_add.add_argument('--type', help='Workflow type: remove, backend, refactor, audit, debug')
    p_add.add_argument('--no-workflow', action='store_true', help='Do not add workflow sub-items')
    p_add.add_argument('--force', action='store_true', help='Add even if a similar item exists')
    p_add.add_argument('--json', help='Read the item from a JSON payload file')
    p_add.set_defaults(func=cmd_add)

    # chkd add-child
    p_child = subparsers.add_parser('add-child', help='Add a sub-item under an item')
    p_child.add_argument('parent', help='Parent item id or part of its title')
    p_child.add_argument('title', help='Sub-item text')
    p_child.set_defaults(func=cmd_add_child)

    # chkd edit
    p_edit = subparsers.add_parser('edit', help='Edit an item')
    p_edit.add_argument('query', help='Item id or part of its title')
    p_edit.add_argument('--title', help='New title')
    p_edit.add_argument('--description', '-d', help='New description ("" to clear)')
    p_edit.add_argument('--story', help='New story ("" to remove)')
    p_edit.add_argument('--requirement', action='append', help='Replace key requirements (repeatable)')
    p_edit.add_argument('--file', action='append', help='Replace files to change (repeatable)')
    p_edit.add_argument('--test', action='append', help='Replace testing notes (repeatable)')
    p_edit.set_defaults(func=cmd_edit)

    # chkd story
    p_story = subparsers.add_parser('story', help='Set an area story')
    p_story.add_argument('area', help='Area code')
    p_story.add_argument('story', help='Story text')
    p_story.set_defaults(func=cmd_story)

    # chkd priority
    p_priority = subparsers.add_parser('priority', help='Set item priority')
    p_priority.add_argument('query', help='Item id or part of its title')
    p_priority.add_argument('priority', choices=['1', '2', '3', 'none'], help='1 high, 3 low, none for backlog')
    p_priority.set_defaults(func=cmd_priority)

    # chkd tags
    p_tags = subparsers.add_parser('tags', help='Replace item tags')
    p_tags.add_argument('query', help='Item id or part of its title')
    p_tags.add_argument('tags', nargs='*', help='Tags (none to clear)')
    p_tags.set_defaults(func=cmd_tags)

    # chkd delete
    p_delete = subparsers.add_parser('delete', help='Delete an item and its sub-items')
    p_delete.add_argument('query', help='Item id or part of its title')
    p_delete.set_defaults(func=cmd_delete)

    # chkd clean
    p_clean = subparsers.add_parser('clean', help='Remove sub-items once all are done')
    p_clean.add_argument('query', help='Item id or part of its title')
    p_clean.set_defaults(func=cmd_clean)

    # chkd move
    p_move = subparsers.add_parser('move', help='Move an item to another area')
    p_move.add_argument('query', help='Item id or part of its title')
    p_move.add_argument('area', help='Target area code')
    p_move.set_defaults(func=cmd_move)

    # chkd transfer
    p_transfer = subparsers.add_parser('transfer', help='Move an item into another spec file')
    p_transfer.add_argument('query', help='Item id or part of its title')
    p_transfer.add_argument('target', help='Target spec file')
    p_transfer.add_argument('area', help='Target area code')
    p_transfer.set_defaults(func=cmd_transfer)

    # chkd tbc
    p_tbc = subparsers.add_parser('tbc', help='List metadata sections still marked TBC')
    p_tbc.add_argument('query', help='Item id or part of its title')
    p_tbc.set_defaults(func=cmd_tbc)

    # chkd validate
    p_validate = subparsers.add_parser('validate', help='Check SPEC.md formatting')
    p_validate.set_defaults(func=cmd_validate)

    # chkd repair
    p_repair = subparsers.add_parser('repair', help='Fix [X] and [] markers')
    p_repair.set_defaults(func=cmd_repair)

    # chkd duplicates
    p_dupes = subparsers.add_parser('duplicates', help='Find items similar to a title')
    p_dupes.add_argument('title', help='Proposed title')
    p_dupes.add_argument('--area', '-a', help='Only this area code')
    p_dupes.set_defaults(func=cmd_duplicates)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
