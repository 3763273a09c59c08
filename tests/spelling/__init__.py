"""
hashspell Tests Package
=======================
Test suite for the hash table, morphology rules, tokenizer, checker and CLI.

Run all tests: python3 -m pytest tests/spelling/ -v
Run specific: python3 -m pytest tests/spelling/test_hash_table.py -v
"""
