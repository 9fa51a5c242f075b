"""Fixture reference site served without network access."""

import pytest
from bs4 import BeautifulSoup


ROOT_PATH = "/apps-script/reference"
COLORS_PATH = "/apps-script/reference/colors"
FOO_PATH = "/apps-script/reference/colors/foo"
PAINTER_PATH = "/apps-script/reference/colors/painter"
SETTINGS_PATH = "/apps-script/reference/settings"


ROOT_HTML = """
<html><body>
<nav>
  <div class="devsite-nav-expandable">
    <ul class="devsite-nav-section">
      <li class="devsite-nav-item"><a href="/apps-script/reference/colors">Colors</a></li>
      <li class="devsite-nav-item"><a href="/apps-script/reference/colors/foo">Foo</a></li>
    </ul>
  </div>
  <div class="devsite-nav-expandable">
    <ul class="devsite-nav-section">
      <li class="devsite-nav-item"><a href="/apps-script/reference/settings">Settings</a></li>
    </ul>
  </div>
</nav>
</body></html>
"""

COLORS_HTML = """
<html><body>
<h1 class="devsite-page-title">Colors Service</h1>
<div class="devsite-article-body">
  <p>This service provides colors.</p>
  <p>Second paragraph.</p>
  <h2 id="classes">Classes</h2>
  <div class="toc">
    <table class="member">
      <tr><th>Name</th><th>Brief description</th></tr>
      <tr><td><a href="/apps-script/reference/colors/foo">Foo</a></td><td>An enum of colors</td></tr>
      <tr><td><a href="/apps-script/reference/colors/painter">Painter</a></td><td>A painter that applies colors.</td></tr>
    </table>
  </div>
</div>
</body></html>
"""

FOO_HTML = """
<html><body>
<table class="members property">
  <tr><th>Property</th><th>Type</th><th>Description</th></tr>
  <tr><td><code>Red</code></td><td><code>Enum</code></td><td>the color red</td></tr>
  <tr><td><code>Blue</code></td><td><code>Enum</code></td><td>the color blue</td></tr>
</table>
</body></html>
"""

PAINTER_HTML = """
<html><body>
<table class="members property">
  <tr><th>Property</th><th>Type</th><th>Description</th></tr>
  <tr><td>color</td><td>Foo</td><td>An enum value for the brush color</td></tr>
  <tr><td>width</td><td>Integer</td><td>Brush width in pixels</td></tr>
</table>
<div class="function doc" id="setOptions(Object)">
  <h3>setOptions(options)</h3>
  <p>Sets painting options.</p>
  <pre class="prettyprint">painter.setOptions({Retries: 3});</pre>
  <h4>Parameters</h4>
  <table class="function param">
    <tr><th>Name</th><th>Type</th><th>Description</th></tr>
    <tr><td><code>options</code></td><td><code>Object</code></td><td>advanced parameters for X</td></tr>
  </table>
  <h4>Advanced parameters</h4>
  <table class="function advancedparam">
    <tr><th>Name</th><th>Type</th><th>Description</th></tr>
    <tr><td><code>Retries</code></td><td><code>Integer</code></td><td>number of retries</td></tr>
  </table>
  <h4 id="setOptions(Object)-return">Return</h4>
  <p><code>Painter</code> — this painter, for chaining</p>
</div>
<div class="function doc" id="paint(String,Integer[])">
  <h3>paint(label, strokes)</h3>
  <p>Paints a label.</p>
  <h4>Parameters</h4>
  <table class="function param">
    <tr><th>Name</th><th>Type</th><th>Description</th></tr>
    <tr><td><code>label</code></td><td><code>String</code></td><td>the label</td></tr>
    <tr><td><code>strokes</code></td><td><code>Integer[]</code></td><td>stroke widths</td></tr>
  </table>
  <h4 id="paint(String,Integer[])-return">Return</h4>
  <p><code>String[]</code> - the painted labels</p>
</div>
<div class="function doc" id="reset()">
  <h3>reset()</h3>
</div>
</body></html>
"""

SETTINGS_HTML = """
<html><body>
<h1 class="devsite-page-title">Settings</h1>
<div class="devsite-article-body">
  <p>Script settings.</p>
</div>
</body></html>
"""

SITE = {
    ROOT_PATH: ROOT_HTML,
    COLORS_PATH: COLORS_HTML,
    FOO_PATH: FOO_HTML,
    PAINTER_PATH: PAINTER_HTML,
    SETTINGS_PATH: SETTINGS_HTML,
}


class FakeSource:
    """Serves *pages* by path and records every request."""

    def __init__(self, pages: dict[str, str]) -> None:
        self.pages = pages
        self.calls: list[str] = []

    def __call__(self, path: str):
        self.calls.append(path)
        markup = self.pages.get(path)
        if markup is None:
            return None
        return BeautifulSoup(markup, "html.parser")

    def url_for(self, path: str) -> str:
        return "https://docs.example" + path


def soup(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup, "html.parser")


@pytest.fixture
def site() -> dict[str, str]:
    return dict(SITE)


@pytest.fixture
def source(site) -> FakeSource:
    return FakeSource(site)


@pytest.fixture
def make_source():
    return FakeSource


@pytest.fixture
def parse():
    return soup
