"""
chkd edit / story / priority / tags - Change an item's text and decorations.
"""

from chkd.lib.config import SpecConfig
from chkd.spec import writer


def cmd_edit(args, config: SpecConfig) -> int:
    fields = {
        "title": args.title,
        "description": args.description,
        "story": args.story,
        "key_requirements": args.requirement,
        "files_to_change": args.file,
        "testing": args.test,
    }
    fields = {k: v for k, v in fields.items() if v is not None}
    if not fields:
        print("ERROR: Nothing to change. Pass at least one of --title, --description, --story, "
              "--requirement, --file, --test")
        return 2

    new_id = writer.edit_item(
        config.spec_path, args.query,
        strict=config.strict_validation, timeout=config.lock_timeout, **fields,
    )
    print(f"Updated {new_id}")
    return 0


def cmd_story(args, config: SpecConfig) -> int:
    writer.update_area_story(
        config.spec_path, args.area, args.story,
        strict=config.strict_validation, timeout=config.lock_timeout,
    )
    print(f"Updated story for {args.area.upper()}")
    return 0


def cmd_priority(args, config: SpecConfig) -> int:
    priority = None if args.priority == "none" else int(args.priority)
    item_id = writer.set_priority(
        config.spec_path, args.query, priority,
        strict=config.strict_validation, timeout=config.lock_timeout,
    )
    print(f"{item_id}: " + (f"P{priority}" if priority else "backlog"))
    return 0


def cmd_tags(args, config: SpecConfig) -> int:
    item_id = writer.set_tags(
        config.spec_path, args.query, args.tags,
        strict=config.strict_validation, timeout=config.lock_timeout,
    )
    print(f"{item_id}: " + (" ".join(f"#{t}" for t in writer.normalize_tags(args.tags)) or "no tags"))
    return 0
