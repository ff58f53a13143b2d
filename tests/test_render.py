"""Tests for chkd.spec.render module."""

from chkd.spec.models import Area, Document, Item
from chkd.spec.parser import parse
from chkd.spec.render import item_text, render


SAMPLE = """\
# Project

## Site Design

> As a visitor

Landing pages.

- [x] [P1] **SD.1 Landing #web** #seo - Hero section

> Make it pop

**Key requirements:**
- Fast

  - [x] Explore > Research
  - [ ] Build > Code

## Area: API (Public Interface)
- [~] **API.1 Tokens**
- [!] Blocked thing
- [-] Skipped thing

### Phase 3: Legacy
- [ ] Old task
"""


def item_shape(item):
    return (
        item.id, item.title, item.status, item.priority, item.tags, item.description,
        item.story, item.key_requirements, item.files_to_change, item.testing,
        [item_shape(c) for c in item.children],
    )


def shape(doc):
    return (
        doc.title, doc.total_items, doc.completed_items, doc.progress,
        [
            (a.name, a.code, a.number, a.status, a.story, a.description, [item_shape(i) for i in a.items])
            for a in doc.areas
        ],
    )


class TestRoundTrip:
    """parse(render(doc)) matches doc."""

    def test_sample(self):
        """Rendering then parsing should keep the tree shape."""
        doc = parse(SAMPLE)
        assert shape(parse(render(doc))) == shape(doc)

    def test_render_is_stable(self):
        """Rendering a rendered document should not change it."""
        once = render(parse(SAMPLE))
        assert render(parse(once)) == once

    def test_nested_metadata(self):
        """Metadata under sub-items should survive a round trip."""
        doc = parse(
            "## Backend\n"
            "- [ ] Parent\n"
            "  - [ ] Child\n"
            "\n"
            "    **Testing:**\n"
            "    - Unit\n"
            "  - [ ] Sibling\n"
        )
        assert doc.areas[0].items[0].children[0].testing == ["Unit"]
        assert shape(parse(render(doc))) == shape(doc)


class TestRender:
    """Output format."""

    def test_area_headers(self):
        """Each area kind should keep its header format."""
        text = render(parse(SAMPLE))
        assert "## Site Design\n" in text
        assert "## Area: API (Public Interface)\n" in text
        assert "### Phase 3: Legacy\n" in text

    def test_ends_with_single_newline(self):
        """Output should end with exactly one newline."""
        text = render(parse(SAMPLE))
        assert text.endswith("\n")
        assert not text.endswith("\n\n")

    def test_markers(self):
        """Every status should render its marker."""
        text = render(parse(SAMPLE))
        assert "- [~] **API.1 Tokens**" in text
        assert "- [!] **Blocked thing**" in text
        assert "- [-] **Skipped thing**" in text
        assert "  - [x] **Explore > Research**" in text

    def test_no_title(self):
        """A document without a title should start with its first area."""
        doc = Document(title="", areas=[Area(name="Backend", code="BE", line=1)])
        assert render(doc) == "## Backend\n"


class TestItemText:
    """Single item line text."""

    def test_full(self):
        """Priority, tags and description should all render."""
        item = Item(id="x", title="Login", description="Form", status="open", line=1, priority=2, tags=["ui"])
        assert item_text(item) == "[P2] **Login** #ui - Form"

    def test_inline_tags_not_repeated(self):
        """Tags already in the title should not be repeated."""
        item = Item(id="x", title="Login #auth", description="", status="open", line=1, tags=["auth", "ui"])
        assert item_text(item) == "**Login #auth** #ui"

    def test_title_with_bold_kept_plain(self):
        """Titles containing bold text should stay plain."""
        item = Item(id="x", title="a **b** c", description="", status="open", line=1)
        assert item_text(item) == "a **b** c"
