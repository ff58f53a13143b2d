"""Spec document engine: parse SPEC.md, resolve queries, apply line-precise edits."""

from chkd.spec.duplicates import find_duplicates, has_duplicates
from chkd.spec.errors import (
    Ambiguous,
    AreaNotFound,
    InvalidTransition,
    NotFound,
    ParseMalformed,
    SpecError,
)
from chkd.spec.models import Area, Document, Item, WorkflowStep
from chkd.spec.parser import parse, parse_file, validate
from chkd.spec.render import render
from chkd.spec.resolver import find, find_area, find_item_by_id, find_items, find_with_area
from chkd.spec.workflow import template_for
from chkd.spec.writer import (
    add_child_item,
    add_item,
    add_item_from_payload,
    block_item,
    check_item_tbc,
    delete_item,
    edit_item,
    edit_item_from_payload,
    mark_complete,
    mark_in_progress,
    mark_incomplete,
    move_item,
    remove_completed_children,
    repair_file,
    set_priority,
    set_tags,
    skip_item,
    transfer_item,
    unblock_item,
    unskip_item,
    update_area_story,
)

__all__ = [
    "Ambiguous",
    "Area",
    "AreaNotFound",
    "Document",
    "InvalidTransition",
    "Item",
    "NotFound",
    "ParseMalformed",
    "SpecError",
    "WorkflowStep",
    "add_child_item",
    "add_item",
    "add_item_from_payload",
    "block_item",
    "check_item_tbc",
    "delete_item",
    "edit_item",
    "edit_item_from_payload",
    "find",
    "find_area",
    "find_duplicates",
    "find_item_by_id",
    "find_items",
    "find_with_area",
    "has_duplicates",
    "mark_complete",
    "mark_in_progress",
    "mark_incomplete",
    "move_item",
    "parse",
    "parse_file",
    "remove_completed_children",
    "render",
    "repair_file",
    "set_priority",
    "set_tags",
    "skip_item",
    "template_for",
    "transfer_item",
    "unblock_item",
    "unskip_item",
    "update_area_story",
    "validate",
]
