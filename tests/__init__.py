"""Test suite for dog_breed_matcher."""
