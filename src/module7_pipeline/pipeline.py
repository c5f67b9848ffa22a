# file: src/module7_pipeline/pipeline.py

"""
Coding pipeline orchestrator.

Wires the stages together the way a request handler would use them:

    encode:  message -> (G generated if absent) -> codeword -> channel
             -> received vector + error diagnostics
    decode:  received vector + G -> H -> syndrome table -> corrected
             vector -> primary (message) vector + success check

Every call builds its own matrices and table, so a pipeline holds no
per-request state. The only shared object is the channel random stream,
which is created once from channel.seed so consecutive calls (and all
chunks of a batch) draw from one sequence.
"""

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from module1_code_construction import (
    ValidationError,
    as_bit_matrix,
    as_bit_vector,
    check_code_parameters,
    generate_generator_matrix,
    generate_parity_check_matrix,
)
from module2_encoding import encode_chunks, encode_vector
from module3_channel import make_rng, transmit, transmit_chunks
from module4_syndrome import SyndromeTable, build_syndrome_table
from module5_decoding import decode_chunks, decode_vector, get_primary_chunks, get_primary_vector
from module6_analysis import count_errors, error_positions, summarize_batch
from .config import get_default_config, validate_config

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Decoding successful!"
FAILURE_MESSAGE = "Decoding finished with errors."


@dataclass
class EncodeResult:
    """Outcome of encoding and transmitting one message."""
    generator: List[List[int]]
    encoded: List[int]
    received: List[int]
    error_count: int
    error_positions: List[int]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class DecodeResult:
    """Outcome of decoding one received vector."""
    decoded: List[int]
    primary: List[int]
    error_count: int
    error_positions: List[int]
    success: Optional[bool]
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ChunkBatchResult:
    """Outcome of sending a batch of message chunks through the full chain."""
    generator: List[List[int]]
    encoded: List[List[int]]
    received: List[List[int]]
    decoded: List[List[int]]
    primary: List[List[int]]
    channel_stats: Dict[str, Any] = field(default_factory=dict)
    message_stats: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _as_lists(vectors) -> List[List[int]]:
    return [np.asarray(v).tolist() for v in vectors]


class CodingPipeline:
    """
    End-to-end linear block code pipeline.

    Parameters:
        config (dict): Configuration dictionary (see default_config.yaml).
            Uses the hardcoded defaults when None.
        rng (np.random.Generator): Channel random source. Overrides
            channel.seed when given.
    """

    def __init__(self, config: Optional[dict] = None, rng: Optional[np.random.Generator] = None):
        self.config = validate_config(config if config is not None else get_default_config())

        code = self.config.get('code', {})
        channel = self.config.get('channel', {})

        self.max_n: int = code.get('max_n', 20)
        self.table_timeout: Optional[float] = code.get('table_timeout_seconds')
        self.error_probability: float = channel.get('error_probability', 0.05)
        self.rng = rng if rng is not None else make_rng(channel.get('seed'))

    # ------------------------------------------------------------------
    # Code construction
    # ------------------------------------------------------------------
    def _resolve_generator(self, n: int, k: int, generator) -> np.ndarray:
        if generator is None:
            return generate_generator_matrix(n, k, self.rng)

        G = as_bit_matrix(generator, "generator matrix")
        if G.shape != (k, n):
            raise ValidationError(
                f"generator matrix shape {G.shape} does not match (k, n) = ({k}, {n})"
            )
        return G

    def build_table(self, parity_check) -> SyndromeTable:
        """Build the syndrome table for H under the configured limits."""
        H = as_bit_matrix(parity_check, "parity-check matrix")
        n = H.shape[1]
        return build_syndrome_table(
            n, n - H.shape[0], H,
            max_n=self.max_n,
            timeout=self.table_timeout
        )

    def _pe(self, pe: Optional[float]) -> float:
        return self.error_probability if pe is None else pe

    # ------------------------------------------------------------------
    # Single vector
    # ------------------------------------------------------------------
    def encode(
        self,
        vector,
        n: int,
        k: int,
        pe: Optional[float] = None,
        generator=None
    ) -> EncodeResult:
        """
        Encode a message and send it through the channel.

        Args:
            vector: Length-k binary message
            n, k: Code parameters (0 < k <= n)
            pe: Bit error probability (channel.error_probability if None)
            generator: Optional k x n generator matrix; generated if None

        Returns:
            EncodeResult with G, codeword, received vector and diagnostics

        Raises:
            ValidationError: If parameters, message or G are invalid
        """
        check_code_parameters(n, k)
        message = as_bit_vector(vector, "primary vector", length=k)
        G = self._resolve_generator(n, k, generator)

        encoded = encode_vector(message, G)
        received = transmit(encoded, self._pe(pe), self.rng)

        result = EncodeResult(
            generator=G.tolist(),
            encoded=encoded.tolist(),
            received=received.tolist(),
            error_count=count_errors(encoded, received),
            error_positions=error_positions(encoded, received),
        )
        logger.info(
            "Encoded (%d, %d) vector; channel introduced %d error(s) at %s",
            n, k, result.error_count, result.error_positions
        )
        return result

    def decode(
        self,
        received,
        generator,
        encoded=None,
        original=None
    ) -> DecodeResult:
        """
        Decode a received vector and recover the message.

        Args:
            received: Length-n vector from the channel
            generator: k x n generator matrix in standard form
            encoded: Codeword before transmission, for error diagnostics
            original: Original message, to judge success

        Returns:
            DecodeResult with corrected vector, primary vector and status

        Raises:
            ValidationError: If the received vector or G is missing or malformed
            ConfigurationError: If G is not in standard form
        """
        if received is None:
            raise ValidationError("Did not get vector for decoding.")
        r = as_bit_vector(received, "received vector")
        if r.shape[0] == 0:
            raise ValidationError("Did not get vector for decoding.")
        if generator is None:
            raise ValidationError("Did not get matrix G.")

        G = as_bit_matrix(generator, "generator matrix")
        k = G.shape[0]
        H = generate_parity_check_matrix(G)
        r = as_bit_vector(r, "received vector", length=G.shape[1])

        decoded = decode_vector(r, H, self.build_table(H))
        primary = get_primary_vector(k, decoded)

        if encoded is not None:
            errors = count_errors(encoded, r)
            positions = error_positions(encoded, r)
        else:
            errors = 0
            positions = []

        if original is not None:
            success = bool(np.array_equal(np.asarray(original).ravel(), primary))
            message = SUCCESS_MESSAGE if success else FAILURE_MESSAGE
        else:
            success = None
            message = "Decoding finished."

        logger.info("Decoded vector: %s", message)
        return DecodeResult(
            decoded=decoded.tolist(),
            primary=primary.tolist(),
            error_count=errors,
            error_positions=positions,
            success=success,
            message=message,
        )

    # ------------------------------------------------------------------
    # Chunk batches
    # ------------------------------------------------------------------
    def encode_chunks(self, chunks: Sequence, generator) -> List[np.ndarray]:
        return encode_chunks(chunks, generator)

    def transmit_chunks(self, chunks: Sequence, pe: Optional[float] = None) -> List[np.ndarray]:
        return transmit_chunks(chunks, self._pe(pe), self.rng)

    def decode_chunks(self, chunks: Sequence, generator) -> List[np.ndarray]:
        """Decode a batch of received chunks, building the table once."""
        H = generate_parity_check_matrix(generator)
        return decode_chunks(chunks, H, self.build_table(H))

    def process_chunks(
        self,
        chunks: Sequence,
        n: int,
        k: int,
        pe: Optional[float] = None,
        generator=None,
        remaining_bits=None
    ) -> ChunkBatchResult:
        """
        Encode, transmit and decode a batch of k-bit message chunks.

        Args:
            chunks: Sequence of length-k binary messages
            n, k: Code parameters
            pe: Bit error probability (channel.error_probability if None)
            generator: Optional k x n generator matrix in standard form
            remaining_bits: Trailing bits shorter than k, sent uncoded and
                appended to the primary chunks unchanged

        Returns:
            ChunkBatchResult with every intermediate stage and statistics
        """
        check_code_parameters(n, k)
        G = self._resolve_generator(n, k, generator)

        encoded = self.encode_chunks(chunks, G)
        received = self.transmit_chunks(encoded, pe)
        decoded = self.decode_chunks(received, G)
        primary = get_primary_chunks(k, decoded, remaining_bits)

        messages = [as_bit_vector(chunk, "chunk", length=k) for chunk in chunks]
        if remaining_bits is not None and len(remaining_bits) > 0:
            messages.append(as_bit_vector(remaining_bits, "remaining bits"))

        result = ChunkBatchResult(
            generator=G.tolist(),
            encoded=_as_lists(encoded),
            received=_as_lists(received),
            decoded=_as_lists(decoded),
            primary=_as_lists(primary),
            channel_stats=summarize_batch(encoded, received),
            message_stats=summarize_batch(messages, primary),
        )
        logger.info(
            "Processed %d chunk(s): channel BER %.4f, residual BER %.4f",
            len(encoded), result.channel_stats['ber'], result.message_stats['ber']
        )
        return result
