import os

from hypothesis import settings
from hypothesis import strategies as st

from fretwise.pitch import NoteName


def configure_hypo() -> None:
    settings.register_profile("fast", max_examples=10)
    if os.environ.get("HYPO_SLOW") != "1":
        settings.load_profile("fast")


def note_names() -> st.SearchStrategy[NoteName]:
    return st.sampled_from(list(NoteName))
