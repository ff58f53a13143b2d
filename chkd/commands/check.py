"""
chkd tbc / validate / repair / duplicates - Read-only checks and format repair.
"""

from chkd.lib.config import SpecConfig
from chkd.spec import writer
from chkd.spec.duplicates import find_duplicates, has_duplicates
from chkd.spec.parser import parse_file, validate


def _print_issues(result) -> None:
    for issue in result.issues:
        tag = "ERROR" if issue.type == "error" else "WARN "
        fix = " (fixable)" if issue.fixable else ""
        print(f"  {tag} line {issue.line}: {issue.message}{fix}")
        if issue.suggestion:
            print(f"         {issue.suggestion}")


def cmd_tbc(args, config: SpecConfig) -> int:
    """Exit 1 while any metadata section still says TBC."""
    result = writer.check_item_tbc(config.spec_path, args.query)
    if not result.has_tbc:
        print(f"{result.item_title}: all sections filled in")
        return 0
    print(f"{result.item_title}: still TBC")
    for field in result.tbc_fields:
        print(f"  - {field}")
    return 1


def cmd_validate(args, config: SpecConfig) -> int:
    result = validate(config.spec_path.read_text(encoding="utf-8"))
    summary = result.summary
    print(f"{config.spec_path}: {summary['areas_found']} areas, "
          f"{summary['completed_items']}/{summary['total_items']} items done ({summary['progress']}%)")

    if not result.issues:
        print("No issues found")
        return 0

    _print_issues(result)
    print()
    print(f"{len(result.errors)} error(s), {len(result.warnings)} warning(s)")
    return 0 if result.valid else 1


def cmd_repair(args, config: SpecConfig) -> int:
    fixes, result = writer.repair_file(config.spec_path, timeout=config.lock_timeout)
    print(f"Fixed {fixes} line(s)")
    if result.issues:
        _print_issues(result)
    return 0 if result.valid else 1


def cmd_duplicates(args, config: SpecConfig) -> int:
    matches = find_duplicates(parse_file(config.spec_path), args.title, args.area)
    if not matches:
        print(f'No similar items for "{args.title}"')
        return 0

    for m in matches:
        print(f"  {m.similarity:.0%}  {m.match_type:<8} {m.area_code:<5} {m.title}  ({m.item_id})")
    return 1 if has_duplicates(matches) else 0
