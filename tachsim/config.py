# tachsim/config.py

class SimulationConfig:
    """Run defaults for the endurance simulation."""

    # 50-hour endurance run at 1-minute resolution
    DEFAULT_TICKS = 50 * 60
    DELTA_SECONDS = 60.0

    LOG_PATH = "flight_log.csv"
    CSV_FIELDS = [
        'time_step',
        'total_seconds',
        'hours',
        'minutes',
        'seconds',
        'rpm',
        'band',
        'caution_seconds',
        'redline_seconds',
    ]

    # Per-tick pilot zone messages (Below Idle / Normal / Caution / Redline)
    EMIT_ZONE_MESSAGES = False

    LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
