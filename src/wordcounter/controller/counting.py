"""
Count Action
============
Connects the window's "count" button to the format dispatcher.

The whole extraction runs synchronously on the caller's (UI) thread. Every
WordCountError ends up in the state as a display string; anything else is a
bug and propagates.
"""
import logging
from typing import Optional

from wordcounter.model.dispatcher import count_words
from wordcounter.model.errors import WordCountError
from wordcounter.model.state import CounterState

logger = logging.getLogger(__name__)


def run_count(state: CounterState) -> Optional[int]:
    """
    Counts words in the selected file and stores the outcome in the state.

    Returns:
        The word count, or None if no file is selected or the attempt failed.
    """
    if not state.has_file:
        logger.debug("Count requested with no file selected, ignoring.")
        return None

    try:
        count = count_words(state.file_path)
    except WordCountError as e:
        logger.warning(f"Counting failed for '{state.file_path}': {e}")
        state.record_error(str(e))
        return None

    logger.info(f"Counted {count} words in '{state.file_path}'")
    state.record_count(count)
    return count
