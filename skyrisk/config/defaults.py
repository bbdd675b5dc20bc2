"""Default demo climatology: typical monthly extremes, indexed from January = 0."""

from skyrisk.models.climatology import ClimatologyRecord

DEMO_CLIMATOLOGY: list[ClimatologyRecord] = [
    ClimatologyRecord(month=0, tmax=28, tmin=15, precip=5, wind=8),
    ClimatologyRecord(month=1, tmax=30, tmin=16, precip=3, wind=10),
    ClimatologyRecord(month=2, tmax=33, tmin=18, precip=2, wind=9),
    ClimatologyRecord(month=3, tmax=36, tmin=20, precip=0, wind=12),
    ClimatologyRecord(month=4, tmax=38, tmin=22, precip=1, wind=11),
    ClimatologyRecord(month=5, tmax=40, tmin=25, precip=0, wind=13),
    ClimatologyRecord(month=6, tmax=39, tmin=24, precip=2, wind=10),
    ClimatologyRecord(month=7, tmax=37, tmin=23, precip=5, wind=12),
    ClimatologyRecord(month=8, tmax=35, tmin=21, precip=8, wind=9),
    ClimatologyRecord(month=9, tmax=32, tmin=19, precip=10, wind=8),
    ClimatologyRecord(month=10, tmax=30, tmin=17, precip=12, wind=7),
    ClimatologyRecord(month=11, tmax=28, tmin=15, precip=15, wind=6),
]
