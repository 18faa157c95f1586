from typing import Optional

from atheris import FuzzedDataProvider


class OledframeFuzzedDataProvider(FuzzedDataProvider):  # type: ignore[misc]
    def ConsumeRandomBytes(self) -> bytes:
        int_range = self.ConsumeIntInRange(0, self.remaining_bytes())
        return bytes(self.ConsumeBytes(int_range))

    def ConsumeRemainingBytes(self) -> bytes:
        return bytes(self.ConsumeBytes(self.remaining_bytes()))

    def ConsumeOptionalIntInRange(self, min: int, max: int) -> Optional[int]:
        if self.ConsumeBool():
            return int(self.ConsumeIntInRange(min, max))
        return None
