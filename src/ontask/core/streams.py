"""Stream records supplied by the Streams plugin."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Stream:
    """A named collection of notes backed by a folder."""

    id: str
    name: str
    folder: str
    icon: str = ""
    show_today_in_ribbon: bool = False
    add_command: bool = False

    @property
    def has_folder(self) -> bool:
        return bool(self.folder and self.folder.strip())

    @classmethod
    def from_dict(cls, data: dict) -> "Stream":
        """Create Stream from an entry of the plugin's data file."""
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name") or "",
            folder=data.get("folder", "") or "",
            icon=data.get("icon", "") or "",
            show_today_in_ribbon=bool(data.get("showTodayInRibbon", False)),
            add_command=bool(data.get("addCommand", False)),
        )
