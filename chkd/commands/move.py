"""
chkd delete / clean / move / transfer - Remove and relocate items.
"""

from pathlib import Path

from chkd.lib.config import SpecConfig
from chkd.spec import writer
from chkd.spec.parser import iter_all


def cmd_delete(args, config: SpecConfig) -> int:
    item = writer.delete_item(
        config.spec_path, args.query,
        strict=config.strict_validation, timeout=config.lock_timeout,
    )
    count = 1 + sum(1 for _ in iter_all(item.children))
    print(f"Deleted {item.title}" + (f" and {count - 1} sub-item(s)" if count > 1 else ""))
    return 0


def cmd_clean(args, config: SpecConfig) -> int:
    result = writer.remove_completed_children(
        config.spec_path, args.query,
        strict=config.strict_validation, timeout=config.lock_timeout,
    )
    if result.reason:
        print(f"Nothing removed: {result.reason}" + (f" ({result.kept} open)" if result.kept else ""))
        return 1 if result.kept else 0
    print(f"Removed {result.removed} completed sub-item(s)")
    return 0


def cmd_move(args, config: SpecConfig) -> int:
    result = writer.move_item(
        config.spec_path, args.query, args.area,
        strict=config.strict_validation, timeout=config.lock_timeout,
    )
    print(f"Moved to {args.area.upper()} as {result.new_item_id} (line {result.line})")
    return 0


def cmd_transfer(args, config: SpecConfig) -> int:
    target = Path(args.target)
    if not target.exists():
        print(f"ERROR: Target spec not found: {target}")
        return 2

    result = writer.transfer_item(
        config.spec_path, target, args.query, args.area,
        strict=config.strict_validation, timeout=config.lock_timeout,
    )
    print(f"Transferred to {target} as {result.new_item_id} (line {result.line})")
    return 0
