import re

from app.components.post_detail import comment_config, render_post_detail
from app.schemas.blog import NavigationContext
from tests.conftest import make_post, make_summary

OLDER = make_summary("/older/", title="Older", date="May 01, 2023", excerpt="Older bits")
NEWER = make_summary("/newer/", title="Newer", date="May 01, 2025", excerpt="Newer bits")


def nav_cell(html: str, name: str) -> str:
    match = re.search(
        rf'<section class="blog-post-nav-{name}"[^>]*>(.*?)</section>', html, re.S
    )
    return match.group(1).strip()


def test_renders_heading_tag_line_and_raw_body(site):
    post = make_post(tags="foo, bar", html="<p>Body <b>bold</b></p>")

    html = render_post_detail(post, NavigationContext(), site, "/hello/", "")

    assert '<h1 itemprop="headline">Hello</h1>' in html
    assert "<p>foo, bar | January 01, 2024</p>" in html
    assert "<p>Body <b>bold</b></p>" in html


def test_tag_line_without_tags(site):
    html = render_post_detail(make_post(), NavigationContext(), site, "/hello/", "")

    assert "<p>January 01, 2024</p>" in html


def test_interior_post_renders_both_neighbors(site):
    nav = NavigationContext(previous=OLDER, next=NEWER)

    html = render_post_detail(make_post(), nav, site, "/hello/", "")

    previous = nav_cell(html, "previous")
    following = nav_cell(html, "next")
    assert "Previous:" in previous
    assert 'href="/older/" rel="prev"><strong>Older</strong>' in previous
    assert "<p>May 01, 2023</p>" in previous
    assert "Older bits" in previous
    assert "Next:" in following
    assert 'href="/newer/" rel="next"><strong>Newer</strong>' in following


def test_first_post_has_empty_previous_cell(site):
    html = render_post_detail(
        make_post(), NavigationContext(next=NEWER), site, "/hello/", ""
    )

    assert nav_cell(html, "previous") == ""
    assert "Newer" in nav_cell(html, "next")


def test_last_post_has_empty_next_cell(site):
    html = render_post_detail(
        make_post(), NavigationContext(previous=OLDER), site, "/hello/", ""
    )

    assert nav_cell(html, "next") == ""
    assert "Older" in nav_cell(html, "previous")


def test_comment_identifier_prefers_frontmatter_id(site):
    config = comment_config(make_post(id="node-1", frontmatterId="X"), site)

    assert config.identifier == "X"
    assert config.url == "https://example.com/hello/"
    assert config.title == "Hello"


def test_comment_identifier_falls_back_to_post_id(site):
    config = comment_config(make_post(id="node-1"), site)

    assert config.identifier == "node-1"


def test_comments_follow_navigation(site):
    html = render_post_detail(
        make_post(frontmatterId="X"), NavigationContext(), site, "/hello/", "notebook"
    )

    assert html.index("blog-post-nav") < html.index("disqus_thread")
    assert 'this.page.identifier = "X";' in html
    assert 'this.page.url = "https://example.com/hello/";' in html


def test_no_comments_without_shortname(site):
    html = render_post_detail(make_post(), NavigationContext(), site, "/hello/", "")

    assert "disqus_thread" not in html


def test_neighbor_links_use_path_prefix(site):
    nav = NavigationContext(previous=OLDER, next=NEWER)

    html = render_post_detail(make_post(), nav, site, "/hello/", path_prefix="/blog")

    assert 'href="/blog/older/" rel="prev"' in html
    assert 'href="/blog/newer/" rel="next"' in html


def test_comments_off_by_default(site):
    html = render_post_detail(make_post(), NavigationContext(), site, "/hello/")

    assert "disqus_thread" not in html


def test_bio_in_article_footer(site):
    html = render_post_detail(make_post(), NavigationContext(), site, "/hello/", "")

    assert "Written by <strong>Ada</strong> writes about engines." in html
