"""Pytest configuration for CSS Style Importer tests."""

import pytest
import logging

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

@pytest.fixture(scope='session')
def sample_css():
    """Return sample CSS content for testing."""
    return """
    // Brand palette
    :root {
      --brand-color: #0af;
      --gray-100: rgb(245, 245, 245);
      --overlay: rgba(0, 0, 0, 0.5);
    }
    --accent: hsl(120, 100%, 50%);

    .heading-1 {
      font-family: "Roboto", Arial;
      font-size: 24px;
      font-weight: 700;
      line-height: 32px;
      letter-spacing: normal;
    }

    .caption {
      font-size: 12px;
      text-transform: uppercase;
    }
    """

@pytest.fixture(scope='session')
def bad_color_css():
    """Return CSS whose variable batch contains an unsupported color."""
    return """
    :root {
      --white: #fff;
      --broken: not-a-color;
    }
    .body {
      font-size: 16px;
    }
    """

@pytest.fixture(scope='session')
def malformed_category_css():
    """Return CSS whose second category has text after its closing brace."""
    return """
    .body {
      font-size: 16px;
    }
    #hero {
      font-size: 48px;
    } trailing
    .caption {
      font-size: 12px;
    }
    """

@pytest.fixture(scope='session')
def single_line_css():
    """Return CSS written with one rule per line."""
    return (
        ":root { --black: #000; --white: #fff; }\n"
        ".label-2 { font-size: 14px; font-weight: 500; }\n"
    )
