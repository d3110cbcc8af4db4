"""Process state shared by every command handler."""

from typing import Callable, List

from ..config import Config
from ..db import Gateway


class State:
    """Configuration and storage handed to each handler."""

    def __init__(self, config: Config, db: Gateway) -> None:
        self.config = config
        self.db = db


Handler = Callable[[State, List[str]], None]
