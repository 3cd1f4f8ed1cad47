import csv
import os
import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from src.module0_config import load_config
from src.module1_hamming import (
    HammingCodec,
    hamming_encode,
    hamming_decode,
    compute_ber,
    count_byte_errors,
    compute_redundancy_overhead,
)
from src.module2_channel import RandomSource, inject_errors

# --------------------------------------------------
# Sweep the per-frame error probability. For each value, measure the
# fraction of frames hit, the bit error rate of the data bits before
# correction, and the residual bit and byte error rates after decoding.
# --------------------------------------------------
config = load_config()

RUNS = 2000
PAYLOAD_BYTES = 64
PROBABILITIES = [0, 5, 10, 25, 50, 100]

codec = HammingCodec.from_config(config)
source = RandomSource(seed=2024)
rng = np.random.default_rng(2024)

print(f"Hamming(15,11): code rate {codec.get_code_rate():.4f}, "
      f"overhead {compute_redundancy_overhead():.2f}%")

rows = []
for probability in PROBABILITIES:
    frames_hit = 0
    frames_total = 0
    raw_ber = 0.0
    residual_ber = 0.0
    byte_errors = 0
    damaged = 0

    for _ in range(RUNS):
        payload = bytes(rng.integers(0, 256, size=PAYLOAD_BYTES, dtype=np.uint8))
        frames = hamming_encode(payload, config)
        noisy, flipped = inject_errors(frames, probability, source)

        uncorrected_bits = codec.extract_data_bits(noisy)[:8 * len(payload)]
        uncorrected = bytes(np.packbits(uncorrected_bits, bitorder='big'))
        decoded = hamming_decode(noisy, len(payload), config)

        frames_hit += int(flipped.sum())
        frames_total += frames.shape[0]
        raw_ber += compute_ber(payload, uncorrected)
        residual_ber += compute_ber(payload, decoded)
        errors = count_byte_errors(payload, decoded)
        byte_errors += errors
        damaged += errors > 0

    rows.append({
        "frame_error_probability": probability,
        "runs": RUNS,
        "observed_frame_error_rate": frames_hit / frames_total,
        "raw_ber": raw_ber / RUNS,
        "residual_ber": residual_ber / RUNS,
        "residual_byte_error_rate": byte_errors / (RUNS * PAYLOAD_BYTES),
        "damaged_payload_rate": damaged / RUNS,
    })
    print(f"q={probability:5.1f}% → frames hit={rows[-1]['observed_frame_error_rate']:.4f}, "
          f"raw BER={rows[-1]['raw_ber']:.5f}, residual BER={rows[-1]['residual_ber']:.5f}, "
          f"damaged={rows[-1]['damaged_payload_rate']:.4f}")

# --------------------------------------------------
# Save
# --------------------------------------------------
OUT = Path("experiments/results_residual_error_rate.csv")
OUT.parent.mkdir(parents=True, exist_ok=True)

with open(OUT, "w", newline="") as f:
    writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
    writer.writeheader()
    writer.writerows(rows)

print(f"Saved → {OUT}")
