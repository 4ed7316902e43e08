# Entry point for the MLX vs Ollama benchmark
#   python benchmark.py            aggregated benchmark over the configured iterations
#   python benchmark.py --single   one judged comparison
#   python benchmark.py --json     also print the report as JSON

import sys
from src.shared.config import Config
from src.shared.logging import LoggingManager
from src.benchmark import BenchmarkRunner


if __name__ == "__main__":
    args = [arg.lower() for arg in sys.argv[1:]]
    single_shot = any(arg in ['--single', 'single'] for arg in args)
    as_json = '--json' in args

    config = Config()
    LoggingManager.setup_logging(config.log_level, config.library_log_levels)
    runner = BenchmarkRunner(config, single_shot=single_shot, as_json=as_json)
    runner.run()
