# run.py
import argparse
import subprocess
import sys

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--model", required=True, choices=["knn", "radius"])
    ap.add_argument("--seed", type=int, help="override the dataset seed")
    ap.add_argument("--outdir", type=str, help="where curves CSV/PNG go (default: results/)")
    args = ap.parse_args()

    seed_args = ["--seed", str(args.seed)] if args.seed is not None else []

    cmd = [sys.executable, "-m", "src.run_knn", "--model", args.model, "--mode", "summary"] + seed_args
    print("\n[run.py] Summarizing my neighbors model...")
    ret = subprocess.call(cmd)
    if ret != 0:
        sys.exit(ret)

    cmd_curves = [sys.executable, "-m", "src.run_knn", "--model", args.model, "--mode", "curves"] + seed_args
    if args.outdir:
        cmd_curves += ["--outdir", args.outdir]
    print("\n[run.py] Rendering prediction curves...")
    ret = subprocess.call(cmd_curves)
    if ret != 0:
        sys.exit(ret)

    # ---- sklearn baseline on the SAME points
    cmd_fw = [sys.executable, "-m", "src.framework_knn", "--model", args.model] + seed_args
    print("\n[run.py] Running sklearn neighbors baseline...")
    ret2 = subprocess.call(cmd_fw)
    if ret2 != 0:
        sys.exit(ret2)

if __name__ == "__main__":
    main()
