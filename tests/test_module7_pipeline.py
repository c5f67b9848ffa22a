"""
Unit tests for Module 7: Pipeline and configuration.

Test coverage:
    - YAML configuration loading, merging and failure modes
    - Vector encode/decode requests with diagnostics and status
    - Chunk batch processing with remaining bits
    - Reproducibility from channel.seed
"""

import logging

import numpy as np
import pytest

from module1_code_construction import (
    ValidationError,
    ConfigurationError,
    is_standard_form,
)
from module7_pipeline import (
    CodingPipeline,
    load_config,
    get_default_config,
    validate_config,
    configure_logging,
    SUCCESS_MESSAGE,
    FAILURE_MESSAGE,
)


def make_config(seed=0, pe=0.0, max_n=20):
    config = get_default_config()
    config['channel']['seed'] = seed
    config['channel']['error_probability'] = pe
    config['code']['max_n'] = max_n
    return config


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved = root.level
    yield root
    root.setLevel(saved)


class TestConfig:
    """Test configuration loading."""

    def test_packaged_default(self):
        config = load_config()
        assert config['code']['max_n'] == 20
        assert config['channel']['seed'] is None
        assert config['channel']['error_probability'] == 0.05

    def test_partial_override_is_merged(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("channel:\n  seed: 42\ncode:\n  max_n: 12\n")

        config = load_config(str(path))

        assert config['channel']['seed'] == 42
        assert config['channel']['error_probability'] == 0.05
        assert config['code']['max_n'] == 12
        assert config['system']['verbose'] is True

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == get_default_config()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("code: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Cannot load"):
            load_config(str(path))

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_defaults_are_fresh_copies(self):
        first = get_default_config()
        first['code']['max_n'] = 3
        assert get_default_config()['code']['max_n'] == 20

    @pytest.mark.parametrize("text", [
        "code:\n  max_n: null\n",
        "code:\n  max_n: 0\n",
        "code:\n  max_n: 12.5\n",
        "code:\n  table_timeout_seconds: -1\n",
        "channel:\n  error_probability: 1.5\n",
        "channel:\n  seed: -3\n",
        "system:\n  log_level: LOUD\n",
        "code: null\n",
    ])
    def test_invalid_values_rejected_on_load(self, tmp_path, text):
        path = tmp_path / "config.yaml"
        path.write_text(text)
        with pytest.raises(ConfigurationError):
            load_config(str(path))

    def test_packaged_default_is_valid(self):
        config = get_default_config()
        assert validate_config(config) is config

    def test_log_level_from_file_reaches_root_logger(self, tmp_path, root_logger):
        path = tmp_path / "config.yaml"
        path.write_text("system:\n  log_level: DEBUG\n")

        configure_logging(load_config(str(path)))

        assert root_logger.level == logging.DEBUG

    def test_verbose_false_without_level(self, root_logger):
        config = get_default_config()
        config['system'] = {'verbose': False, 'log_level': None}

        configure_logging(config)

        assert root_logger.level == logging.WARNING

    def test_quiet_overrides_configured_level(self, root_logger):
        config = get_default_config()
        config['system']['log_level'] = 'DEBUG'

        configure_logging(config, quiet=True)

        assert root_logger.level == logging.WARNING

    @pytest.mark.parametrize("config", [
        {'code': {'max_n': None}, 'channel': {'seed': 1}},
        {'code': {'max_n': True}},
        {'code': {'max_n': -4}},
        {'code': {'table_timeout_seconds': 0}},
        {'code': {'table_timeout_seconds': '5'}},
        {'channel': {'error_probability': 2}},
        {'channel': {'error_probability': '0.1'}},
        {'channel': {'seed': 1.5}},
        {'code': 7},
    ])
    def test_pipeline_rejects_invalid_config(self, config):
        with pytest.raises(ConfigurationError):
            CodingPipeline(config)

    def test_pipeline_accepts_partial_config(self):
        pipeline = CodingPipeline({'channel': {'seed': 1}})
        assert pipeline.max_n == 20
        assert pipeline.table_timeout is None
        assert pipeline.error_probability == 0.05


class TestEncodeRequest:
    """Test message encoding + transmission."""

    def test_given_generator_noiseless(self, hamming_g):
        pipeline = CodingPipeline(make_config(pe=0.0))
        result = pipeline.encode([1, 0, 1, 1], 7, 4, generator=hamming_g)

        assert result.generator == hamming_g.tolist()
        assert result.encoded == [1, 0, 1, 1, 0, 1, 0]
        assert result.received == result.encoded
        assert result.error_count == 0
        assert result.error_positions == []

    def test_generated_generator(self):
        pipeline = CodingPipeline(make_config(seed=5))
        result = pipeline.encode([1, 1, 0], 6, 3, pe=0.0)

        G = np.array(result.generator)
        assert G.shape == (3, 6)
        assert is_standard_form(G)
        assert result.encoded[:3] == [1, 1, 0]

    def test_diagnostics_match_vectors(self):
        pipeline = CodingPipeline(make_config(seed=9))
        result = pipeline.encode([1, 0, 1, 0, 1], 12, 5, pe=0.4)

        diff = [i for i, (a, b) in enumerate(zip(result.encoded, result.received)) if a != b]
        assert result.error_positions == diff
        assert result.error_count == len(diff)

    def test_seed_reproducibility(self):
        first = CodingPipeline(make_config(seed=123)).encode([1, 0, 0, 1], 9, 4, pe=0.3)
        second = CodingPipeline(make_config(seed=123)).encode([1, 0, 0, 1], 9, 4, pe=0.3)
        assert first.to_dict() == second.to_dict()

    def test_explicit_rng_overrides_seed(self, hamming_g):
        a = CodingPipeline(make_config(seed=1), rng=np.random.default_rng(77))
        b = CodingPipeline(make_config(seed=2), rng=np.random.default_rng(77))

        left = a.encode([1, 0, 1, 1], 7, 4, pe=0.5, generator=hamming_g)
        right = b.encode([1, 0, 1, 1], 7, 4, pe=0.5, generator=hamming_g)
        assert left.received == right.received

    def test_wrong_message_length(self):
        with pytest.raises(ValidationError, match="exactly 4"):
            CodingPipeline(make_config()).encode([1, 0, 1], 7, 4)

    def test_non_binary_message(self):
        with pytest.raises(ValidationError, match="binary"):
            CodingPipeline(make_config()).encode([1, 0, 1, 5], 7, 4)

    def test_generator_shape_mismatch(self, hamming_g):
        with pytest.raises(ValidationError, match="does not match"):
            CodingPipeline(make_config()).encode([1, 0, 1], 7, 3, generator=hamming_g)

    def test_invalid_parameters(self):
        with pytest.raises(ValidationError):
            CodingPipeline(make_config()).encode([1], 1, 2)

    def test_to_dict(self, hamming_g):
        result = CodingPipeline(make_config()).encode([0, 0, 0, 1], 7, 4, generator=hamming_g)
        assert set(result.to_dict()) == {
            'generator', 'encoded', 'received', 'error_count', 'error_positions'
        }


class TestDecodeRequest:
    """Test decoding + message recovery."""

    def test_single_error_success(self, hamming_g):
        pipeline = CodingPipeline(make_config())
        result = pipeline.decode(
            received=[1, 0, 0, 1, 0, 1, 0],
            generator=hamming_g,
            encoded=[1, 0, 1, 1, 0, 1, 0],
            original=[1, 0, 1, 1],
        )

        assert result.decoded == [1, 0, 1, 1, 0, 1, 0]
        assert result.primary == [1, 0, 1, 1]
        assert result.error_count == 1
        assert result.error_positions == [2]
        assert result.success is True
        assert result.message == SUCCESS_MESSAGE

    def test_double_error_reports_failure(self, hamming_g):
        result = CodingPipeline(make_config()).decode(
            received=[1, 1, 0, 0, 0, 0, 0],
            generator=hamming_g,
            encoded=[0] * 7,
            original=[0, 0, 0, 0],
        )

        assert result.primary == [1, 1, 1, 0]
        assert result.error_count == 2
        assert result.success is False
        assert result.message == FAILURE_MESSAGE

    def test_without_reference_vectors(self, hamming_g):
        result = CodingPipeline(make_config()).decode([0, 0, 0, 0, 0, 0, 1], hamming_g)

        assert result.decoded == [0] * 7
        assert result.success is None
        assert result.error_count == 0

    def test_encode_then_decode(self):
        pipeline = CodingPipeline(make_config(seed=31))
        message = [1, 0, 1, 1, 0]

        sent = pipeline.encode(message, 10, 5, pe=0.0)
        result = pipeline.decode(sent.received, sent.generator, sent.encoded, message)

        assert result.success is True
        assert result.decoded == sent.encoded

    @pytest.mark.parametrize("received", [None, []])
    def test_missing_received(self, received, hamming_g):
        with pytest.raises(ValidationError, match="Did not get vector"):
            CodingPipeline(make_config()).decode(received, hamming_g)

    @pytest.mark.parametrize("received", [5, [[1, 0, 1]], "1010"])
    def test_malformed_received(self, received, hamming_g):
        with pytest.raises(ValidationError):
            CodingPipeline(make_config()).decode(received, hamming_g)

    def test_missing_generator(self):
        with pytest.raises(ValidationError, match="Did not get matrix G"):
            CodingPipeline(make_config()).decode([0, 1], None)

    def test_non_standard_generator(self):
        with pytest.raises(ConfigurationError):
            CodingPipeline(make_config()).decode([0, 1, 1], [[0, 1, 1]])

    def test_received_length_mismatch(self, hamming_g):
        with pytest.raises(ValidationError):
            CodingPipeline(make_config()).decode([0, 1, 1], hamming_g)

    def test_size_ceiling_from_config(self, hamming_g):
        with pytest.raises(ValidationError, match="exceeds the configured maximum"):
            CodingPipeline(make_config(max_n=6)).decode([0] * 7, hamming_g)


class TestChunkProcessing:
    """Test batch processing through every stage."""

    def test_noiseless_batch_with_remaining_bits(self, hamming_g):
        chunks = [[1, 0, 1, 1], [0, 1, 1, 0], [1, 1, 1, 1]]
        result = CodingPipeline(make_config(pe=0.0)).process_chunks(
            chunks, 7, 4, generator=hamming_g, remaining_bits=[1, 0]
        )

        assert result.encoded == result.received == result.decoded
        assert result.primary == chunks + [[1, 0]]
        assert result.channel_stats['bit_errors'] == 0
        assert result.message_stats['ber'] == 0.0

    def test_batch_is_reproducible(self):
        chunks = [[1, 0, 0], [0, 1, 1], [1, 1, 0], [0, 0, 1]]

        first = CodingPipeline(make_config(seed=4)).process_chunks(chunks, 6, 3, pe=0.2)
        second = CodingPipeline(make_config(seed=4)).process_chunks(chunks, 6, 3, pe=0.2)

        assert first.to_dict() == second.to_dict()

    def test_decoded_chunks_are_codewords(self):
        from module4_syndrome import compute_syndrome
        from module1_code_construction import generate_parity_check_matrix

        chunks = [[1, 0, 1, 0]] * 10
        result = CodingPipeline(make_config(seed=8)).process_chunks(chunks, 8, 4, pe=0.15)

        H = generate_parity_check_matrix(result.generator)
        for decoded in result.decoded:
            assert not compute_syndrome(decoded, H).any()

    def test_individual_batch_stages(self, hamming_g):
        pipeline = CodingPipeline(make_config(seed=3))

        encoded = pipeline.encode_chunks([[1, 0, 1, 1]], hamming_g)
        received = pipeline.transmit_chunks(encoded, pe=0.0)
        decoded = pipeline.decode_chunks(received, hamming_g)

        assert decoded[0].tolist() == [1, 0, 1, 1, 0, 1, 0]

    def test_bad_chunk(self, hamming_g):
        with pytest.raises(ValidationError):
            CodingPipeline(make_config()).process_chunks([[1, 0]], 7, 4, generator=hamming_g)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
