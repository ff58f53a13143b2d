"""
chkd add / chkd add-child - Insert new items.
"""

import json
from pathlib import Path

from chkd.lib.config import SpecConfig
from chkd.lib.workflows_config import load_workflows_config
from chkd.spec import writer
from chkd.spec.duplicates import find_duplicates, has_duplicates
from chkd.spec.parser import parse_file


def cmd_add(args, config: SpecConfig) -> int:
    """Add a top-level item, warning first if it looks like an existing one."""
    options = {"strict": config.strict_validation, "timeout": config.lock_timeout}
    catalog = load_workflows_config(config.workflows_path)

    if args.json:
        payload = json.loads(Path(args.json).read_text())
        result = writer.add_item_from_payload(config.spec_path, payload, catalog=catalog, **options)
        print(f"Added {result.section_id} {result.title} (line {result.line})")
        return 0

    if not args.title or not args.area:
        print("ERROR: title and --area are required (or pass --json)")
        return 2

    if not args.force:
        matches = find_duplicates(parse_file(config.spec_path), args.title)
        if has_duplicates(matches):
            print(f'ERROR: "{args.title}" looks like an existing item:')
            for m in matches:
                print(f"  - {m.item_id} -> {m.title} ({m.match_type}, {m.similarity:.0%})")
            print("\nUse --force to add it anyway.")
            return 1

    result = writer.add_item(
        config.spec_path,
        args.title,
        args.area,
        description=args.description,
        story=args.story,
        key_requirements=args.requirement or None,
        files_to_change=args.file or None,
        testing=args.test or None,
        file_link=args.link,
        with_workflow=not args.no_workflow,
        workflow_type=args.type,
        catalog=catalog,
        **options,
    )
    print(f"Added {result.section_id} {result.title} (line {result.line})")
    print(f"  id: {result.item_id}")
    return 0


def cmd_add_child(args, config: SpecConfig) -> int:
    result = writer.add_child_item(
        config.spec_path, args.parent, args.title,
        strict=config.strict_validation, timeout=config.lock_timeout,
    )
    print(f"Added {result.child_id} (line {result.line})")
    return 0
