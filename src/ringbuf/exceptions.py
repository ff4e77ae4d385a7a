class ShiftOutOfRangeError(ValueError):
    def __init__(self, count: int, length: int):
        super().__init__("Shift num is out of length.")
        self.count = count
        self.length = length
