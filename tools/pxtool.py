#!/usr/bin/env python3
import argparse, csv, os
from picturecross.difficulty import Difficulty, DIFFICULTY_CONFIG, difficulty_from_name
from picturecross.grid import density
from picturecross.puzzlegen.generator import generate_grid
from picturecross.rng import resolve_seed

def write_tsv(mat, path, include_header=False):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        if include_header:
            w.writerow(list(range(len(mat[0]))))
        for r in mat:
            w.writerow(r)

def _difficulty(name):
    try:
        return difficulty_from_name(name)
    except ValueError as e:
        raise SystemExit(str(e))

def cmd_emit(args):
    seed = resolve_seed(args.seed)
    mat = generate_grid(seed, args.size, _difficulty(args.difficulty))
    write_tsv(mat, args.out, include_header=args.header)
    print(f"Wrote {args.out} (seed {seed})")

def cmd_golden(args):
    diff = _difficulty(args.difficulty)
    base = os.path.join(args.outdir, diff.name.lower(), str(args.size))
    os.makedirs(base, exist_ok=True)
    for seed in range(args.start, args.start + args.count):
        mat = generate_grid(seed, args.size, diff)
        write_tsv(mat, os.path.join(base, f"{seed}.tsv"))
    print(f"Wrote golden pack to {base}")

def cmd_density(args):
    for diff in Difficulty:
        band = DIFFICULTY_CONFIG[diff]
        seeds = range(args.start, args.start + args.count)
        mean = sum(density(generate_grid(s, args.size, band)) for s in seeds) / args.count
        flag = "" if band.contains(mean) else "  (outside band)"
        print(f"{diff.name:<10} [{band.min_density:.2f}, {band.max_density:.2f}]  mean {mean:.3f}{flag}")

def main():
    p = argparse.ArgumentParser()
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--seed', type=str, default=None, help="number or any text; random if omitted")
    p1.add_argument('--size', type=int, default=10)
    p1.add_argument('--difficulty', type=str, default='MEDIUM')
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('golden')
    p2.add_argument('--size', type=int, default=10)
    p2.add_argument('--difficulty', type=str, default='MEDIUM')
    p2.add_argument('--start', type=int, default=0)
    p2.add_argument('--count', type=int, default=25)
    p2.add_argument('--outdir', type=str, required=True)
    p2.set_defaults(func=cmd_golden)
    p3 = sub.add_parser('density')
    p3.add_argument('--size', type=int, default=10)
    p3.add_argument('--start', type=int, default=0)
    p3.add_argument('--count', type=int, default=500)
    p3.set_defaults(func=cmd_density)
    args = p.parse_args()
    args.func(args)

if __name__ == '__main__':
    main()
