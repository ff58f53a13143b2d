"""
chkd tick / untick / start / skip / unskip / block / unblock - Change an item's checkbox.
"""

from chkd.lib.config import SpecConfig
from chkd.spec import writer

ACTIONS = {
    "tick": writer.mark_complete,
    "untick": writer.mark_incomplete,
    "start": writer.mark_in_progress,
    "skip": writer.skip_item,
    "unskip": writer.unskip_item,
    "block": writer.block_item,
    "unblock": writer.unblock_item,
}

SCOPED_ACTIONS = ("tick", "untick", "start")


def cmd_mark(args, config: SpecConfig) -> int:
    action = ACTIONS[args.action]
    kwargs = {"strict": config.strict_validation, "timeout": config.lock_timeout}
    if args.action in SCOPED_ACTIONS and getattr(args, "within", None):
        kwargs["scope_parent_id"] = args.within

    change = action(config.spec_path, args.query, **kwargs)
    print(f"{change.title}: {change.from_status} -> {change.to_status}")
    return 0
