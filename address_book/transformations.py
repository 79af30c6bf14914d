#!/usr/bin/env python3
"""
Pandas summary of a rendered batch:
- flatten JSON
- keep only the columns the list shows
- attach the item id each row was rendered under
"""

from typing import Sequence
import pandas as pd

from .api_client import raw_results
from .models import UserRecord
from .renderer import item_id

SUMMARY_COLUMNS = ["name.first", "picture.thumbnail"]


def flatten_batch(users: Sequence[UserRecord]) -> pd.DataFrame:
    # One row per user, in batch order, columns: index, item_id, name.first, picture.thumbnail.
    if not users:
        return pd.DataFrame(columns=["index", "item_id", *SUMMARY_COLUMNS])

    df_raw = pd.json_normalize(raw_results(users))
    # json_normalize turns {"name": {"first": ...}} into a flat "name.first" column.

    df_summary = df_raw[SUMMARY_COLUMNS].copy()
    # .copy() because we add columns below and want an independent frame, not a view.

    df_summary.insert(0, "index", range(len(df_summary)))
    df_summary.insert(1, "item_id", [item_id(i) for i in range(len(df_summary))])
    return df_summary
