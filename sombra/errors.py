class ShadowError(ValueError):
    pass


class DegenerateSunAngleError(ShadowError):
    # sol en o bajo el horizonte: largo de sombra infinito o negativo
    def __init__(self, coordinate, altitude):
        self.coordinate = coordinate
        self.altitude = altitude
        where = f" en {tuple(coordinate)}" if coordinate is not None else ""
        super().__init__(f"Altitud solar {altitude:.4f} rad{where}: sin sombra proyectable")


class InvalidHeightError(ShadowError):
    pass


class DegenerateGeometryError(ShadowError):
    pass


class InvalidDistanceError(ShadowError):
    pass


class NumericOverflowError(ShadowError):
    pass


class ConfigError(ShadowError):
    pass
