"""Tests for navpaths nav template macros.

Renders the nav_link and nav_list macros with a jinja2 Environment backed
by PackageLoader and verifies the generated HTML.
"""

from jinja2 import Environment, PackageLoader

from navpaths.entry import NavLink
from navpaths.templating.filters import BUILTIN_FILTERS


def _make_env() -> Environment:
    """Create a jinja2 env that can load navpaths nav macros."""
    env = Environment(
        loader=PackageLoader("navpaths.templating", "macros"),
        autoescape=True,
    )
    env.filters.update(BUILTIN_FILTERS)
    return env


def _render(env: Environment, source: str, **ctx: object) -> str:
    """Render a template string that imports navpaths nav macros."""
    tpl = env.from_string(source)
    return tpl.render(ctx).strip()


_HOME = NavLink(path=lambda: "/", label="Home")
_PROFILE = NavLink(path=lambda user_id=None: f"/user/{user_id}", label="Profile", group="user")


class TestNavLink:
    def test_basic_render(self) -> None:
        html = _render(
            _make_env(),
            '{% from "navpaths/nav.html" import nav_link %}{{ nav_link(link) }}',
            link=_HOME,
        )
        assert html == '<a href="/">Home</a>'

    def test_args_passed_to_path(self) -> None:
        html = _render(
            _make_env(),
            '{% from "navpaths/nav.html" import nav_link %}{{ nav_link(link, args=[42]) }}',
            link=_PROFILE,
        )
        assert 'href="/user/42"' in html
        assert 'data-group="user"' in html

    def test_with_class(self) -> None:
        html = _render(
            _make_env(),
            '{% from "navpaths/nav.html" import nav_link %}{{ nav_link(link, cls="back") }}',
            link=_HOME,
        )
        assert 'class="back"' in html

    def test_without_class_no_empty_attribute(self) -> None:
        html = _render(
            _make_env(),
            '{% from "navpaths/nav.html" import nav_link %}{{ nav_link(link) }}',
            link=_HOME,
        )
        assert "class=" not in html
        assert "data-group" not in html
        assert "aria-current" not in html

    def test_current_link(self) -> None:
        html = _render(
            _make_env(),
            '{% from "navpaths/nav.html" import nav_link %}'
            '{{ nav_link(link, cls="nav", current="/") }}',
            link=_HOME,
        )
        assert 'class="nav active"' in html
        assert 'aria-current="page"' in html

    def test_custom_active_class(self) -> None:
        html = _render(
            _make_env(),
            '{% from "navpaths/nav.html" import nav_link %}'
            '{{ nav_link(link, current="/", active_class="is-current") }}',
            link=_HOME,
        )
        assert 'class="is-current"' in html

    def test_label_escaped(self) -> None:
        link = NavLink(path=lambda: "/q", label="Q&A <new>")
        html = _render(
            _make_env(),
            '{% from "navpaths/nav.html" import nav_link %}{{ nav_link(link) }}',
            link=link,
        )
        assert "Q&amp;A &lt;new&gt;" in html


class TestNavList:
    def test_renders_links_in_order(self) -> None:
        html = _render(
            _make_env(),
            '{% from "navpaths/nav.html" import nav_list %}{{ nav_list(links, cls="menu") }}',
            links=[_HOME, _PROFILE],
        )
        assert html.startswith('<ul class="menu">')
        assert html.endswith("</ul>")
        assert html.index("Home") < html.index("Profile")
        assert html.count("<li>") == 2

    def test_marks_current(self) -> None:
        html = _render(
            _make_env(),
            '{% from "navpaths/nav.html" import nav_list %}{{ nav_list(links, current="/") }}',
            links=[_HOME, _PROFILE],
        )
        assert html.count('aria-current="page"') == 1
        assert '<a href="/" class="active" aria-current="page">Home</a>' in html

    def test_args_by_label(self) -> None:
        profile = NavLink(path=lambda user_id: f"/user/{user_id}", label="Profile")
        html = _render(
            _make_env(),
            '{% from "navpaths/nav.html" import nav_list %}'
            '{{ nav_list(links, args={"Profile": [42]}) }}',
            links=[_HOME, profile],
        )
        assert '<a href="/">Home</a>' in html
        assert '<a href="/user/42">Profile</a>' in html

    def test_empty(self) -> None:
        html = _render(
            _make_env(),
            '{% from "navpaths/nav.html" import nav_list %}{{ nav_list([]) }}',
        )
        assert html == "<ul>\n</ul>" or html == "<ul></ul>"
