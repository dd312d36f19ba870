import dataclasses
from dataclasses import dataclass

from until_wall.request import RenderRequest, SafeArea


@dataclass(frozen=True)
class DevicePreset:
    name: str
    width: int
    height: int
    kind: str
    orientation: str
    safe_area: SafeArea = SafeArea()

    def apply(self, request: RenderRequest) -> RenderRequest:
        return dataclasses.replace(
            request, width=self.width, height=self.height, safe_area=self.safe_area
        )


DEVICE_PRESETS: tuple[DevicePreset, ...] = (
    DevicePreset(
        "iPhone 15 Pro Max / Plus", 1290, 2796, "iphone", "portrait",
        SafeArea(top=22, bottom=25, left=10, right=10),
    ),
    DevicePreset(
        "iPhone Xs", 1125, 2436, "iphone", "portrait",
        SafeArea(top=25, bottom=10, left=15, right=15),
    ),
    DevicePreset(
        'iPad Pro 13" Portrait', 2048, 2732, "ipad", "portrait", SafeArea(top=5, bottom=5)
    ),
    DevicePreset(
        'iPad Pro 13" Landscape', 2732, 2048, "ipad", "landscape", SafeArea(top=5, bottom=5)
    ),
    DevicePreset('MacBook Air 13"', 2560, 1664, "mac", "landscape"),
)  # fmt: skip


def find_preset(name: str) -> DevicePreset:
    for preset in DEVICE_PRESETS:
        if preset.name.lower() == name.strip().lower():
            return preset
    names = ", ".join(repr(preset.name) for preset in DEVICE_PRESETS)
    raise ValueError(f"Unknown device {name!r}, must be one of {names}")
