"""Rule configuration."""


class RuleConfig:
    """Optional scoring rules."""

    def __init__(
        self,
        mangan_30fu_4han: bool = False,  # Round 4 han 30 fu (1920) up to mangan
        language: str = "ja",
    ):
        self.mangan_30fu_4han = mangan_30fu_4han
        self.language = language

    def to_dict(self) -> dict:
        return {
            "mangan_30fu_4han": self.mangan_30fu_4han,
            "language": self.language,
        }
