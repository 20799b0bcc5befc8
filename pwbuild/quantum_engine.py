"""
Quantum random source: every qubit goes through one Hadamard gate and is
measured, giving fair coin flips that are served through the random.Random
interface so it can be passed as `rng` to the builder.
"""

from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass
from typing import List

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .entropy import bitstring_to_bits, bits_to_int

log = logging.getLogger(__name__)

# 2**-53, same scale random.Random uses for floats.
_RECIP_BPF = 2.0 ** -53


@dataclass
class QuantumRandomConfig:
    # Width of the circuit; checked against the simulator limit on startup.
    num_qubits: int = 20

    # One circuit run yields shots * num_qubits buffered bits.
    shots: int = 64


DEFAULT_QUANTUM_CONFIG = QuantumRandomConfig()


class QuantumRandom(random.Random):
    """
    random.Random backed by qubit measurements on the local Aer simulator.

    Only `getrandbits()` and `random()` touch the circuit; everything else
    (`randrange`, `choice`, `shuffle`, ...) comes from random.Random on top
    of them. Measured bits are buffered and handed out under a lock, so one
    instance can be shared between threads.
    """

    def __init__(self, config: QuantumRandomConfig | None = None) -> None:
        self.config = config or DEFAULT_QUANTUM_CONFIG
        if self.config.num_qubits <= 0:
            raise ValueError(f"num_qubits must be positive, got {self.config.num_qubits}")
        if self.config.shots <= 0:
            raise ValueError(f"shots must be positive, got {self.config.shots}")

        # Local simulator backend.
        self.backend = AerSimulator()

        # Safety: ensure requested num_qubits does not exceed backend capability.
        max_qubits = getattr(self.backend, "num_qubits", None)
        if max_qubits is not None and self.config.num_qubits > max_qubits:
            raise ValueError(
                f"Configured num_qubits={self.config.num_qubits} exceeds "
                f"backend limit ({max_qubits}). "
                "Lower num_qubits in QuantumRandomConfig."
            )

        self._lock = threading.Lock()
        self._bits: List[int] = []
        self.circuit = self._build_circuit()
        self._compiled = transpile(self.circuit, self.backend)
        super().__init__()

    def _build_circuit(self) -> QuantumCircuit:
        """
        |0> -H-> |+> on every qubit, then a computational-basis measurement:
        each qubit reads 0 or 1 with probability 1/2.
        """
        qubits = range(self.config.num_qubits)
        qc = QuantumCircuit(self.config.num_qubits, self.config.num_qubits)
        # Exactly one H per qubit; a second one would undo the superposition.
        qc.h(qubits)
        qc.measure(qubits, qubits)
        return qc

    def _refill(self) -> None:
        # Caller holds self._lock.
        result = self.backend.run(
            self._compiled, shots=self.config.shots, memory=True
        ).result()
        shots = result.get_memory()
        for bitstring in shots:
            # Memory strings list clbit 0 last.
            self._bits.extend(bitstring_to_bits(bitstring[::-1]))
        log.debug(
            "Quantum circuit run: %d shots x %d qubits, %d bits buffered",
            len(shots),
            self.config.num_qubits,
            len(self._bits),
        )

    # --- random.Random interface ---

    def getrandbits(self, k: int) -> int:
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        if k == 0:
            return 0
        with self._lock:
            while len(self._bits) < k:
                self._refill()
            taken = self._bits[:k]
            del self._bits[:k]
        return bits_to_int(taken)

    def random(self) -> float:
        return self.getrandbits(53) * _RECIP_BPF

    def seed(self, *args, **kwds) -> None:
        "Stub method. Measurements cannot be seeded."
        return None

    def _notimplemented(self, *args, **kwds):
        raise NotImplementedError("Quantum measurements have no reproducible state.")

    getstate = setstate = _notimplemented
