"""Performance logging for tracking sessions to spot slow captures and missed frames."""

import time
from pathlib import Path
from datetime import datetime


class PerformanceLogger:
    """Logger for per-sample timing of tracking sessions."""

    def __init__(self, log_dir=None):
        """Initialize performance logger with log directory."""
        if log_dir is None:
            # Default to log directory in the working directory
            log_dir = Path.cwd() / "log"

        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        # Create timestamped log file
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.log_file = self.log_dir / f"tracking_performance_{timestamp}.log"

        # Write header
        with open(self.log_file, 'w') as f:
            f.write(f"Tracking Performance Log - {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
            f.write("=" * 80 + "\n\n")

        self.samples = []
        self.session_start = None
        self.session_label = None

    def start_session(self, label):
        """Mark the start of a tracking session."""
        self.session_start = time.perf_counter()
        self.session_label = label
        self.samples = []

    def log_sample(self, index, count, capture_ms, classify_ms):
        """Record timing for one sample."""
        self.samples.append((index, count, capture_ms, classify_ms))

    def end_session(self, outcome):
        """End session and write all sample timings to log."""
        if self.session_start is None:
            return

        total_ms = (time.perf_counter() - self.session_start) * 1000

        with open(self.log_file, 'a') as f:
            f.write(f"Session '{self.session_label}' @ {datetime.now().strftime('%H:%M:%S.%f')[:-3]}\n")
            f.write(f"  Outcome: {outcome}\n")
            f.write(f"  Total session time: {total_ms:.3f}ms over {len(self.samples)} samples\n")

            for index, count, capture_ms, classify_ms in self.samples:
                f.write(f"  sample {index}: count={count} capture={capture_ms:.3f}ms classify={classify_ms:.3f}ms\n")

            f.write("\n")

        self.session_start = None
        self.session_label = None
        self.samples = []
