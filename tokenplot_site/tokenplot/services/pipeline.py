import logging
from typing import Callable, List, Optional

import numpy as np

from ..exceptions import EmptyTokenizationError, MissingInputError
from ..text import tokenize_words
from .history import SentenceHistory
from .plotting import TokenPlot, build_plot, make_rng

logger = logging.getLogger(__name__)

Tokenizer = Callable[[str], List[str]]


def process_sentence(
    sentence: Optional[str],
    history: SentenceHistory,
    tokenizer: Tokenizer = tokenize_words,
    rng: Optional[np.random.Generator] = None,
) -> TokenPlot:
    """
    Tokenize a sentence, record it and build the plot payload.

    The history is only touched once tokenization has succeeded and produced
    at least one token; every failure before that leaves it as it was.
    Without an explicit `rng` each call draws from a fresh unseeded generator.
    """
    if not sentence:
        raise MissingInputError()

    tokens = tokenizer(sentence)
    logger.debug("Tokenized %s chars into %s tokens", len(sentence), len(tokens))
    if not tokens:
        raise EmptyTokenizationError()

    snapshot = history.record_and_snapshot(sentence)
    plot = build_plot(tokens, history=snapshot, rng=rng if rng is not None else make_rng())
    logger.info(
        "Processed sentence: tokens=%s prediction=%s history=%s",
        len(tokens),
        plot.prediction,
        len(snapshot),
    )
    return plot
