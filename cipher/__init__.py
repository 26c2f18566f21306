"""AES-128 counter-mode decryption of telegram payloads."""

from cipher.aes_ctr import AesCtrCipher, CounterBlockPolicy, decrypt, zero_counter_block

__all__ = ["AesCtrCipher", "CounterBlockPolicy", "decrypt", "zero_counter_block"]
