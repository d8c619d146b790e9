"""Shared pytest fixtures and helpers for imshow tests.

Window tests need a display Tk can open.  They are skipped automatically
when there is none (run them under xvfb-run in CI).
"""

import pytest

# ---------------------------------------------------------------------------
#  Skip helpers
# ---------------------------------------------------------------------------

def _has_display():
    try:
        import tkinter as tk
        root = tk.Tk()
        root.destroy()
        return True
    except Exception:
        return False


requires_display = pytest.mark.skipif(not _has_display(), reason="no display for Tk")


# ---------------------------------------------------------------------------
#  Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def tk_root():
    """Shared hidden root; destroyed (with every window) after the test."""
    from imshow.core import window
    root = window.get_root()
    yield root
    window.shutdown()


@pytest.fixture
def gray_matrix():
    """3 rows x 4 cols, single channel, bytes 0..11."""
    import numpy as np
    return np.arange(12, dtype=np.uint8).reshape(3, 4)


@pytest.fixture
def bgr_matrix():
    """2 rows x 3 cols x 3 channels, bytes 0..17 (BGR order)."""
    import numpy as np
    return np.arange(18, dtype=np.uint8).reshape(2, 3, 3)
