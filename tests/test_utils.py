"""Tests for restrand.utils module."""

import pytest
from restrand.utils.sequence import (
    complement,
    reverse_complement,
    reverse_quality,
)


class TestReverseComplement:
    """Test reverse complement function."""

    def test_simple_sequence(self):
        """Test simple sequence reverse complement."""
        assert reverse_complement("ATCG") == "CGAT"

    def test_palindrome(self):
        """Test that a reverse-palindromic sequence maps to itself."""
        assert reverse_complement("ACGT") == "ACGT"

    def test_flip_example(self):
        """Test the AACG -> CGTT example."""
        assert reverse_complement("AACG") == "CGTT"

    def test_longer_sequence(self):
        """Test longer sequence reverse complement."""
        seq = "GCTGAAGCACTGCACGCCGT"
        rc = reverse_complement(seq)
        assert rc == "ACGGCGTGCAGTGCTTCAGC"

    def test_reverse_complement_is_involutive(self):
        """Test that reverse complement of reverse complement is original."""
        for seq in ["ATCGATCGATCG", "acgtRYKMBVDHSWNn", "AC-GT*xx", "ACGU", "acgu", ""]:
            assert reverse_complement(reverse_complement(seq)) == seq

    def test_lowercase_handling(self):
        """Test that lowercase is handled correctly."""
        assert reverse_complement("atcg") == "cgat"

    def test_mixed_case(self):
        """Test mixed case sequences."""
        assert reverse_complement("AtCg") == "cGaT"
        assert reverse_complement("GGGCCCaaattt") == "aaatttGGGCCC"

    def test_iupac_codes(self):
        """Test IUPAC ambiguity codes are complemented."""
        assert complement("RYKMBVDHSWN") == "YRMKVBHDSWN"
        assert reverse_complement("RYKMBVDHSWN") == "NWSDHBVKMRY"
        assert reverse_complement("ryn") == "nry"

    def test_unknown_symbols_pass_through(self):
        """Test that unrecognized symbols are kept but still reversed."""
        assert reverse_complement("AC-G*") == "*C-GT"
        assert reverse_complement("A1.") == ".1T"
        assert reverse_complement("ACGU") == "UCGT"

    def test_length_preserved(self):
        """Test that output length equals input length."""
        seq = "ACGTN-xRY" * 7
        assert len(reverse_complement(seq)) == len(seq)

    def test_empty_sequence(self):
        """Test empty sequence."""
        assert reverse_complement("") == ""


class TestReverseQuality:
    """Test quality string reversal."""

    def test_reverse(self):
        """Test positional reversal."""
        assert reverse_quality("!!##") == "##!!"
        assert reverse_quality("!#$%") == "%$#!"

    def test_reverse_is_involutive(self):
        """Test that reversing twice gives the original."""
        quality = "IIII#####+++??"
        assert reverse_quality(reverse_quality(quality)) == quality

    def test_stays_aligned_with_sequence(self):
        """Test that quality[i] still belongs to sequence[i] after flipping."""
        sequence = "AACGT"
        quality = "ABCDE"
        rc = reverse_complement(sequence)
        rq = reverse_quality(quality)
        for i in range(len(sequence)):
            # base i of the flipped read came from position len-1-i
            src = len(sequence) - 1 - i
            assert rq[i] == quality[src]
            assert rc[i] == complement(sequence[src])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
