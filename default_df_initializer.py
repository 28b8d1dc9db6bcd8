import pandas as pd


class DefaultDfInitializer:
    """Builds the demo table shown by ``tabview --demo``."""

    ROWS = 40
    COLS = 10
    COL_WIDTH = 15

    def create(self) -> pd.DataFrame:
        data = {
            f"col_{j}": [f"Value ({i}, {j})\n------({i + j})" for i in range(self.ROWS)]
            for j in range(self.COLS)
        }
        return pd.DataFrame(data)

    def widths(self) -> list[int]:
        return [self.COL_WIDTH] * self.COLS
