from typing import TypedDict


class MTStats(TypedDict):
    file_count: int
    dir_count: int
