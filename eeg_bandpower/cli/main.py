"""
Main CLI entry point for EEG Band Power

This module provides the command-line interface: read the input table (or
generate a synthetic series), run the windowing pipeline, write the output
table.
"""

import argparse
import logging
import signal
import sys
from threading import Event
from typing import Optional, Sequence

from ..core.config import INPUT_PATH, OUTPUT_PATH, N_CHANNELS, SAMPLE_RATE, PipelineConfig
from ..core.exceptions import BoundaryError, ProcessingCancelled
from ..acquisition.synthetic import synthesize_series
from ..data_io.reader import load_csv
from ..data_io.writer import save_csv
from ..processing.pipeline import BandPowerPipeline


def run_batch_processing(input_path: str, output_path: str, n_channels: int = N_CHANNELS,
                         workers: int = 1, fake: bool = False, fake_seconds: float = 10.0,
                         seed: int = 42, cancel_event: Optional[Event] = None) -> int:
    """
    Full pass: load, process, write

    Returns:
        int: Number of records written

    Raises:
        BoundaryError: If reading the input or writing the output fails
        ProcessingCancelled: If cancel_event is set mid-pass
    """
    config = PipelineConfig(n_channels=n_channels)
    pipeline = BandPowerPipeline(config, workers=workers)

    if fake:
        logging.info("Using synthetic EEG data")
        series = synthesize_series(duration_sec=fake_seconds, fs=SAMPLE_RATE,
                                   n_channels=n_channels, seed=seed)
    else:
        series = load_csv(input_path, n_channels=n_channels)

    records = pipeline.run(series, cancel_event=cancel_event)
    save_csv(records, output_path, config)
    return len(records)


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser"""
    parser = argparse.ArgumentParser(
        description="EEG Band Power - sliding-window band powers in dB",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Process the default files (eeg_data.csv -> processed_eeg_data.csv)
  python -m eeg_bandpower

  # Explicit paths, 8-channel recording, 4 worker threads
  python -m eeg_bandpower --input session1.csv --output out/session1_bands.csv --channels 8 --workers 4

  # Test with synthetic data
  python -m eeg_bandpower --fake --fake-seconds 30
        """
    )

    # File options
    parser.add_argument("--input", "-i", default=INPUT_PATH,
                        help=f"Input CSV: timestamp, ch1..chC (default: {INPUT_PATH})")
    parser.add_argument("--output", "-o", default=OUTPUT_PATH,
                        help=f"Output CSV for band powers (default: {OUTPUT_PATH})")
    parser.add_argument("--channels", type=int, default=N_CHANNELS,
                        help=f"Number of EEG channel columns (default: {N_CHANNELS})")

    # Processing options
    parser.add_argument("--workers", type=int, default=1,
                        help="Worker threads for window processing (default: 1)")

    # Synthetic data
    parser.add_argument("--fake", action="store_true",
                        help="Use synthetic EEG data instead of the input file")
    parser.add_argument("--fake-seconds", type=float, default=10.0,
                        help="Duration of synthetic data in seconds (default: 10)")
    parser.add_argument("--seed", type=int, default=42,
                        help="Random seed for synthetic data (default: 42)")

    # Logging
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable verbose logging")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Setup logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    if args.channels < 1:
        parser.error(f"--channels must be >= 1, got {args.channels}")
    if args.workers < 1:
        parser.error(f"--workers must be >= 1, got {args.workers}")

    # Graceful shutdown handler
    cancel_event = Event()
    def signal_handler(signum, frame):
        logging.info("Shutdown signal received")
        cancel_event.set()

    previous_handlers = {
        signal.SIGINT: signal.signal(signal.SIGINT, signal_handler),
        signal.SIGTERM: signal.signal(signal.SIGTERM, signal_handler),
    }

    try:
        run_batch_processing(
            args.input, args.output,
            n_channels=args.channels,
            workers=args.workers,
            fake=args.fake,
            fake_seconds=args.fake_seconds,
            seed=args.seed,
            cancel_event=cancel_event,
        )
    except BoundaryError as e:
        logging.error(f"Aborting: {e}")
        return 1
    except ProcessingCancelled as e:
        logging.warning(f"{e} - no output written")
        return 130
    finally:
        for signum, handler in previous_handlers.items():
            signal.signal(signum, handler)

    print(f"Processing complete. Results written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
