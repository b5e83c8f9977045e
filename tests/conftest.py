"""Pytest configuration and shared fixtures."""
import sys
import os
import pytest

# Add repo root and src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))


# ============================================================================
# Common test fixtures
# ============================================================================

@pytest.fixture
def grinning_line():
    """Well-formed fully-qualified registry line."""
    return '1F600                                      ; fully-qualified     # 😀 grinning face'


@pytest.fixture
def sample_registry_lines():
    """Excerpt of emoji-test.txt covering every line kind."""
    return [
        '# emoji-test.txt',
        '# Version: 13.0',
        '',
        '# group: Smileys & Emotion',
        '',
        '# subgroup: face-smiling',
        '1F600                                      ; fully-qualified     # 😀 E1.0 grinning face',
        '1F603                                      ; fully-qualified     # 😃 E0.6 grinning face with big eyes',
        '263A FE0F                                  ; fully-qualified     # ☺️ E0.6 smiling face',
        '263A                                       ; unqualified         # ☺ E0.6 smiling face',
        '1F3FB                                      ; component           # 🏻 E1.0 light skin tone',
        '0023 FE0F 20E3                             ; fully-qualified     # #️⃣ E0.6 keycap: #',
        '1F1E6 1F1FD                                ; fully-qualified     # 🇦🇽 E2.0 flag: Åland Islands',
        '',
        '# smileys & emotion subtotal:\t\t151',
    ]


@pytest.fixture
def archive_path(tmp_path):
    """Path for a snippet pack inside a temporary directory."""
    return tmp_path / 'Emoji Pack (Unicode 13.0).alfredsnippets'
