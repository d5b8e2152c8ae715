"""Shared HTML fixtures for linkaudit tests."""

import pytest

PAGE_URL = "https://acme.com/"

PAGE_HTML = """
<!DOCTYPE html>
<html>
<head><title>Acme</title></head>
<body>
  <header>
    <nav class="main-nav">
      <ul class="menu">
        <li><a href="/home">Home</a></li>
        <li><a href="/about">About</a></li>
        <li><a href="/contact">Contact</a></li>
      </ul>
    </nav>
  </header>
  <main>
    <article>
      <h1>Main Content</h1>
      <p>Here is a link to <a href="/pricing" title="Plans">our pricing</a>.</p>
      <ul>
        <li><a href="/news">News</a></li>
        <li><a href="/NEWS">News again</a></li>
        <li><a href="https://github.com/acme/repo">GitHub</a></li>
        <li><a href="https://acme.com/resources">Resources</a></li>
        <li><a href="/about">About us</a></li>
      </ul>
      <p>Contact us at <a href="mailto:hello@acme.com?subject=Hi">write to us</a>.</p>
      <a href="javascript:void(0)">Toggle</a>
      <a href="#top">Top</a>
      <a href="">Empty</a>
      <a href="/logo"><img src="logo.png" alt="Acme logo"></a>
    </article>
    <aside>
      <a href="https://www.facebook.com/acme">Facebook</a>
      <a href="https://twitter.com/acme">Twitter</a>
    </aside>
  </main>
  <footer class="footer">
    <a href="/privacy">Privacy</a>
    <a href="/terms">Terms</a>
    <a href="/about">About</a>
    <a href="https://linkedin.com/company/acme">LinkedIn</a>
    <p>Email: info@acme.com | Phone: <a href="tel:+1234567890">+1-234-567-890</a></p>
  </footer>
</body>
</html>
"""

ARTICLE_URL = "https://blog.example.com/article/post"

ARTICLE_HTML = """
<html>
<head><title>Article Title</title></head>
<body>
  <header>
    <nav class="navigation">
      <a href="/home">Home</a>
      <a href="/about">About</a>
      <a href="/privacy">Privacy</a>
    </nav>
  </header>
  <main>
    <article class="article-content">
      <h1>Article Title</h1>
      <div class="post-content">
        <p>This is the main article content with <a href="/related-article-1">internal reference</a>
        and <a href="https://example-source.com/research">external source</a>.</p>
        <p>More content with <a href="/category/technology">related category</a> and
        <a href="https://Example-Source.com/RESEARCH">the same source again</a>.</p>
        <p>Jump to <a href="#comments">comments</a> or <a href="javascript:share()">share</a>.</p>
      </div>
    </article>
    <aside class="sidebar">
      <div class="related-posts">
        <a href="/sidebar-link-1">Sidebar Link</a>
      </div>
    </aside>
  </main>
  <footer class="footer">
    <a href="https://facebook.com/blog">Social Link</a>
    <a href="/privacy">Privacy Policy</a>
    <a href="mailto:contact@example.com">Contact Email</a>
    <a href="tel:+1234567890">Phone Number</a>
  </footer>
</body>
</html>
"""


@pytest.fixture
def page_html() -> str:
    return PAGE_HTML


@pytest.fixture
def article_html() -> str:
    return ARTICLE_HTML
