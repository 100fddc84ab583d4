"""
Master runner for all examples.
"""
import argparse
import sys
import subprocess
from pathlib import Path

# Add project root to sys.path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from examples.registry import EXAMPLES

def main():
    parser = argparse.ArgumentParser(description="Run reasonlib examples.")
    parser.add_argument("--tolerance", type=float, default=None, help="Comparison tolerance passed to every example")
    parser.add_argument("--outdir", type=str, default="./_outputs", help="Output directory base")
    parser.add_argument("--include-tags", type=str, help="Comma-separated tags to include (e.g., 'p0,node')")
    parser.add_argument("--exclude-experimental", action="store_true", default=True, help="Skip experimental examples")
    parser.add_argument("--include-experimental", action="store_false", dest="exclude_experimental", help="Include experimental examples")
    parser.add_argument("--fail-fast", action="store_true", help="Stop on first failure")

    args = parser.parse_args()

    include_tags = set(args.include_tags.split(",")) if args.include_tags else set()

    passed = []
    failed = []
    skipped = []

    print(f"Running examples with tolerance={args.tolerance}")
    print("-" * 60)

    for entry in EXAMPLES:
        path_str = entry["path"]
        full_path = Path(__file__).parent / path_str

        # Filters
        if args.exclude_experimental and entry["experimental"]:
            skipped.append((path_str, "Experimental"))
            continue

        if include_tags and not include_tags.intersection(entry["tags"]):
            skipped.append((path_str, "Tag mismatch"))
            continue

        if not full_path.exists():
            failed.append((path_str, "File not found"))
            print(f"[FAIL] {path_str} (File not found)")
            if args.fail_fast: break
            continue

        # Construct command
        cmd = [sys.executable, str(full_path), "--outdir", args.outdir]
        if args.tolerance is not None:
            cmd.extend(["--tolerance", str(args.tolerance)])

        print(f"[RUN ] {path_str} ...", end="", flush=True)
        try:
            # Run in subprocess to isolate
            result = subprocess.run(cmd, capture_output=True, text=True)

            if result.returncode == 0:
                print(" [PASS]")
                passed.append(path_str)
            else:
                print(" [FAIL]")
                print(f"  Exit Code: {result.returncode}")
                print("  Stderr:")
                print(result.stderr)
                failed.append((path_str, "Runtime Error"))
                if args.fail_fast: break
        except OSError as e:
            print(" [ERR ]")
            print(f"  Exception: {e}")
            failed.append((path_str, str(e)))
            if args.fail_fast: break

    print("-" * 60)
    print(f"Summary: {len(passed)} Passed, {len(failed)} Failed, {len(skipped)} Skipped")
    if failed:
        sys.exit(1)

if __name__ == "__main__":
    main()
