#!/usr/bin/env python3
"""
Decoding performance vs. channel error probability

Monte-Carlo sweep over the bit error probability pe of the binary
symmetric channel. For every pe a batch of random messages is encoded
with one random (n, k) code, sent through the channel and decoded with
the syndrome-weight-descent decoder. The script reports, per pe:

    - channel BER (before decoding)
    - residual BER of the recovered messages
    - message success rate
    - Shannon capacity of the channel, next to the code rate k/n

Results are written as CSV and JSON and plotted to PNG.

Example:
    python experiments/exp1_decoding_vs_error_probability.py -n 7 -k 4 \
        --trials 2000 --seed 42 --output-dir experiments/results
"""

import os
import sys
import argparse
import csv
import json
import logging
from collections import Counter
from typing import Dict, List

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt
from tqdm import tqdm

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from module1_code_construction import generate_generator_matrix, generate_parity_check_matrix
from module2_encoding import encode_chunks
from module3_channel import BinarySymmetricChannel, make_rng
from module4_syndrome import build_syndrome_table
from module5_decoding import decode_chunks, get_primary_chunks
from module6_analysis import summarize_batch
from module7_pipeline import configure_logging, load_config


def run_sweep(
    n: int,
    k: int,
    error_probabilities: List[float],
    trials: int,
    seed: int,
    max_n: int
) -> List[Dict]:
    """
    Run the Monte-Carlo sweep.

    Args:
        n, k: Code parameters
        error_probabilities: Channel pe values to evaluate
        trials: Messages sent per pe value
        seed: Seed for the single random stream used throughout
        max_n: Syndrome table size ceiling

    Returns:
        One result row per pe value
    """
    rng = make_rng(seed)

    G = generate_generator_matrix(n, k, rng)
    H = generate_parity_check_matrix(G)
    table = build_syndrome_table(n, k, H, max_n=max_n)
    logging.info(f"Code ({n}, {k}): covering radius {table.max_weight()}, {len(table)} cosets")
    leader_weights = Counter(weight for _, weight in table.items())
    logging.info(f"Coset leaders by weight: {dict(sorted(leader_weights.items()))}")

    rows = []
    for pe in tqdm(error_probabilities, desc="Sweeping pe"):
        messages = rng.integers(0, 2, size=(trials, k), dtype=np.uint8)

        encoded = encode_chunks(messages, G)
        channel = BinarySymmetricChannel(pe, rng)
        received = channel.transmit_chunks(encoded)
        decoded = decode_chunks(received, H, table)
        recovered = get_primary_chunks(k, decoded)

        channel_stats = summarize_batch(encoded, received)
        residual = summarize_batch(list(messages), recovered)

        row = {
            'pe': pe,
            'channel_ber': channel_stats['ber'],
            'residual_ber': residual['ber'],
            'success_rate': 1.0 - residual['chunk_error_rate'],
            'capacity': channel.get_capacity(),
        }
        logging.debug(f"pe={pe:.3f}: {row}")
        rows.append(row)

    return rows


def save_results_csv(rows: List[Dict], output_path: str):
    """Save sweep results to CSV."""
    with open(output_path, 'w', newline='') as f:
        writer = csv.DictWriter(
            f, fieldnames=['pe', 'channel_ber', 'residual_ber', 'success_rate', 'capacity']
        )
        writer.writeheader()
        writer.writerows(rows)

    logging.info(f"Saved results to {output_path}")


def plot_results(rows: List[Dict], n: int, k: int, output_path: str):
    """Plot channel vs. residual BER and success rate."""
    pe = [row['pe'] for row in rows]

    fig, (ax_ber, ax_success) = plt.subplots(1, 2, figsize=(12, 5))

    ax_ber.plot(pe, [row['channel_ber'] for row in rows], marker='o', label='Channel BER')
    ax_ber.plot(pe, [row['residual_ber'] for row in rows], marker='s', label='Residual BER')
    ax_ber.set_xlabel('Error probability pe')
    ax_ber.set_ylabel('Bit error rate')
    ax_ber.set_title(f'({n}, {k}) code: BER')
    ax_ber.legend()
    ax_ber.grid(True, alpha=0.3)

    ax_success.plot(pe, [row['success_rate'] for row in rows], marker='o', color='tab:green')
    ax_success.set_xlabel('Error probability pe')
    ax_success.set_ylabel('Message success rate')
    ax_success.set_title(f'({n}, {k}) code: decoding success')
    ax_success.set_ylim([0.0, 1.05])
    ax_success.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig(output_path, dpi=200, bbox_inches='tight')
    plt.close(fig)

    logging.info(f"Saved plot to {output_path}")


def parse_args():
    parser = argparse.ArgumentParser(description="Decoding success vs. channel error probability")
    parser.add_argument('-n', type=int, default=7, help="Codeword length")
    parser.add_argument('-k', type=int, default=4, help="Message length")
    parser.add_argument('--pe', type=float, nargs='+',
                        default=[0.0, 0.01, 0.02, 0.05, 0.1, 0.15, 0.2, 0.3],
                        help="Error probabilities to evaluate")
    parser.add_argument('--trials', type=int, default=1000, help="Messages per pe value")
    parser.add_argument('--seed', type=int, default=None, help="Random seed (overrides config)")
    parser.add_argument('--config', type=str, default=None, help="Path to YAML config")
    parser.add_argument('--output-dir', type=str, default='experiments/results')
    parser.add_argument('--quiet', action='store_true')
    return parser.parse_args()


def main():
    args = parse_args()
    config = load_config(args.config)
    configure_logging(config, quiet=args.quiet)

    seed = args.seed if args.seed is not None else config['channel'].get('seed')
    max_n = config['code'].get('max_n', 20)

    os.makedirs(args.output_dir, exist_ok=True)

    rows = run_sweep(args.n, args.k, args.pe, args.trials, seed, max_n)

    prefix = os.path.join(args.output_dir, f"decoding_n{args.n}_k{args.k}")
    save_results_csv(rows, prefix + ".csv")
    with open(prefix + ".json", 'w') as f:
        json.dump(
            {'n': args.n, 'k': args.k, 'rate': args.k / args.n, 'seed': seed, 'results': rows},
            f, indent=2
        )
    plot_results(rows, args.n, args.k, prefix + ".png")

    for row in rows:
        print(f"pe={row['pe']:.3f}  channel BER={row['channel_ber']:.4f}  "
              f"residual BER={row['residual_ber']:.4f}  success={row['success_rate']:.3f}  "
              f"capacity={row['capacity']:.3f}")


if __name__ == "__main__":
    main()
