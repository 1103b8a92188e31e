# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Internal pandas helpers"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import pandas as pd


def records_to_dataframe(records: List[Dict[str, Any]], columns: Optional[Sequence[str]] = None) -> pd.DataFrame:
    """Build a DataFrame from a list of resource dicts.

    :param records: Resource objects, one row each.
    :param columns: Columns to keep, in order. Missing keys become NaN. When None,
        every top-level key found in ``records`` becomes a column.
    """
    if columns is not None:
        return pd.DataFrame.from_records(records, columns=list(columns))
    return pd.DataFrame.from_records(records)
