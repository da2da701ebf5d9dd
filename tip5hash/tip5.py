"""The Tip5 permutation and the hash functions built on it."""

from __future__ import annotations

from typing import ClassVar, Iterable, Sequence

from .digest import Digest
from .field import BFieldElement
from .mds import generated_function
from .sponge import Domain, Sponge

STATE_SIZE = 16
NUM_SPLIT_AND_LOOKUP = 4
RATE = 10
NUM_ROUNDS = 7

_MASK64 = (1 << 64) - 1
_MASK32 = 0xFFFF_FFFF

LOOKUP_TABLE = bytes((
    0, 7, 26, 63, 124, 215, 85, 254, 214, 228, 45, 185, 140, 173, 33, 240, 29, 177, 176, 32, 8,
    110, 87, 202, 204, 99, 150, 106, 230, 14, 235, 128, 213, 239, 212, 138, 23, 130, 208, 6, 44,
    71, 93, 116, 146, 189, 251, 81, 199, 97, 38, 28, 73, 179, 95, 84, 152, 48, 35, 119, 49, 88,
    242, 3, 148, 169, 72, 120, 62, 161, 166, 83, 175, 191, 137, 19, 100, 129, 112, 55, 221, 102,
    218, 61, 151, 237, 68, 164, 17, 147, 46, 234, 203, 216, 22, 141, 65, 57, 123, 12, 244, 54, 219,
    231, 96, 77, 180, 154, 5, 253, 133, 165, 98, 195, 205, 134, 245, 30, 9, 188, 59, 142, 186, 197,
    181, 144, 92, 31, 224, 163, 111, 74, 58, 69, 113, 196, 67, 246, 225, 10, 121, 50, 60, 157, 90,
    122, 2, 250, 101, 75, 178, 159, 24, 36, 201, 11, 243, 132, 198, 190, 114, 233, 39, 52, 21, 209,
    108, 238, 91, 187, 18, 104, 194, 37, 153, 34, 200, 143, 126, 155, 236, 118, 64, 80, 172, 89,
    94, 193, 135, 183, 86, 107, 252, 13, 167, 206, 136, 220, 207, 103, 171, 160, 76, 182, 227, 217,
    158, 56, 174, 4, 66, 109, 139, 162, 184, 211, 249, 47, 125, 232, 117, 43, 16, 42, 127, 20, 241,
    25, 149, 105, 156, 51, 53, 168, 145, 247, 223, 79, 78, 226, 15, 222, 82, 115, 70, 210, 27, 41,
    1, 170, 40, 131, 192, 229, 248, 255,
))

_ROUND_CONSTANT_VALUES = (
    (
        1332676891236936200, 16607633045354064669, 12746538998793080786, 15240351333789289931,
        10333439796058208418, 986873372968378050, 153505017314310505, 703086547770691416,
        8522628845961587962, 1727254290898686320, 199492491401196126, 2969174933639985366,
        1607536590362293391, 16971515075282501568, 15401316942841283351, 14178982151025681389,
    ),
    (
        2916963588744282587, 5474267501391258599, 5350367839445462659, 7436373192934779388,
        12563531800071493891, 12265318129758141428, 6524649031155262053, 1388069597090660214,
        3049665785814990091, 5225141380721656276, 10399487208361035835, 6576713996114457203,
        12913805829885867278, 10299910245954679423, 12980779960345402499, 593670858850716490,
    ),
    (
        12184128243723146967, 1315341360419235257, 9107195871057030023, 4354141752578294067,
        8824457881527486794, 14811586928506712910, 7768837314956434138, 2807636171572954860,
        9487703495117094125, 13452575580428891895, 14689488045617615844, 16144091782672017853,
        15471922440568867245, 17295382518415944107, 15054306047726632486, 5708955503115886019,
    ),
    (
        9596017237020520842, 16520851172964236909, 8513472793890943175, 8503326067026609602,
        9402483918549940854, 8614816312698982446, 7744830563717871780, 14419404818700162041,
        8090742384565069824, 15547662568163517559, 17314710073626307254, 10008393716631058961,
        14480243402290327574, 13569194973291808551, 10573516815088946209, 15120483436559336219,
    ),
    (
        3515151310595301563, 1095382462248757907, 5323307938514209350, 14204542692543834582,
        12448773944668684656, 13967843398310696452, 14838288394107326806, 13718313940616442191,
        15032565440414177483, 13769903572116157488, 17074377440395071208, 16931086385239297738,
        8723550055169003617, 590842605971518043, 16642348030861036090, 10708719298241282592,
    ),
    (
        12766914315707517909, 11780889552403245587, 113183285481780712, 9019899125655375514,
        3300264967390964820, 12802381622653377935, 891063765000023873, 15939045541699412539,
        3240223189948727743, 4087221142360949772, 10980466041788253952, 18199914337033135244,
        7168108392363190150, 16860278046098150740, 13088202265571714855, 4712275036097525581,
    ),
    (
        16338034078141228133, 1455012125527134274, 5024057780895012002, 9289161311673217186,
        9401110072402537104, 11919498251456187748, 4173156070774045271, 15647643457869530627,
        15642078237964257476, 1405048341078324037, 3059193199283698832, 1605012781983592984,
        7134876918849821827, 5796994175286958720, 7251651436095127661, 4565856221886323991,
    ),
)

ROUND_CONSTANTS: tuple[tuple[BFieldElement, ...], ...] = tuple(
    tuple(BFieldElement.new(value) for value in row) for row in _ROUND_CONSTANT_VALUES
)

# First column of the circulant MDS matrix, from the SHA-256 hash of "Tip5".
MDS_MATRIX_FIRST_COLUMN = (
    61402, 1108, 28750, 33823, 7454, 43244, 53865, 12034, 56951, 27521, 41351, 40901, 12021,
    59689, 26798, 17845,
)


def offset_fermat_cube_map(x: int) -> int:
    """Map ``x`` to ``(x + 1)^3 - 1`` modulo 257; defines the lookup table."""
    if not 0 <= x < 0xFFFF:
        raise ValueError(f"input out of range: {x}")
    return ((x + 1) ** 3 + 256) % 257


def _split_and_lookup(element: BFieldElement) -> BFieldElement:
    return BFieldElement.from_raw_bytes(element.raw_bytes().translate(LOOKUP_TABLE))


def _power_seven(x: BFieldElement) -> BFieldElement:
    sq = x * x
    qu = sq * sq
    return x * (sq * qu)


def _reduce(lo: int, hi: int) -> BFieldElement:
    s = (lo >> 4) + (hi << 28)
    s_hi = s >> 64
    s_lo = s & _MASK64
    total = s_lo + s_hi * _MASK32
    result = total & _MASK64
    if total >> 64:
        result = (result + _MASK32) & _MASK64
    return BFieldElement.from_raw_u64(result)


class Tip5(Sponge):
    """The Tip5 sponge over a state of 16 field elements."""

    RATE: ClassVar[int] = RATE

    def __init__(self, domain: Domain) -> None:
        zero = BFieldElement.zero()
        if domain is Domain.FIXED_LENGTH:
            capacity = [BFieldElement.one()] * (STATE_SIZE - RATE)
        else:
            capacity = [zero] * (STATE_SIZE - RATE)
        self.state: list[BFieldElement] = [zero] * RATE + capacity

    @classmethod
    def init(cls) -> Tip5:
        return cls(Domain.VARIABLE_LENGTH)

    def absorb(self, chunk: Sequence[BFieldElement]) -> None:
        """Overwrite the rate part of the state with ``chunk`` and permute."""
        chunk = list(chunk)
        if len(chunk) != RATE:
            raise ValueError(f"expected {RATE} elements, got {len(chunk)}")
        self.state[:RATE] = chunk
        self.permutation()

    def squeeze(self) -> tuple[BFieldElement, ...]:
        """Return the rate part of the state, then permute."""
        produce = tuple(self.state[:RATE])
        self.permutation()
        return produce

    def _sbox_layer(self) -> None:
        head = [_split_and_lookup(e) for e in self.state[:NUM_SPLIT_AND_LOOKUP]]
        tail = [_power_seven(e) for e in self.state[NUM_SPLIT_AND_LOOKUP:]]
        self.state = head + tail

    def _mds(self) -> None:
        raws = [e.raw_u64() for e in self.state]
        lo = generated_function([r & _MASK32 for r in raws])
        hi = generated_function([r >> 32 for r in raws])
        self.state = [_reduce(l, h) for l, h in zip(lo, hi)]

    def _round(self, constants: Sequence[BFieldElement]) -> None:
        self._sbox_layer()
        self._mds()
        self.state = [s + c for s, c in zip(self.state, constants)]

    def permutation(self) -> None:
        """Apply all rounds of the permutation to the state."""
        for constants in ROUND_CONSTANTS:
            self._round(constants)

    def trace(self) -> list[tuple[BFieldElement, ...]]:
        """Apply the permutation, returning the initial state and the state after each round."""
        states = [tuple(self.state)]
        for constants in ROUND_CONSTANTS:
            self._round(constants)
            states.append(tuple(self.state))
        return states

    @classmethod
    def hash_10(cls, elements: Iterable[BFieldElement]) -> tuple[BFieldElement, ...]:
        """Hash exactly 10 elements without padding."""
        elements = list(elements)
        if len(elements) != RATE:
            raise ValueError(f"expected {RATE} elements, got {len(elements)}")
        sponge = cls(Domain.FIXED_LENGTH)
        sponge.state[:RATE] = elements
        sponge.permutation()
        return tuple(sponge.state[: Digest.LEN])

    @classmethod
    def hash_pair(cls, left: Digest, right: Digest) -> Digest:
        """Hash two digests together."""
        sponge = cls(Domain.FIXED_LENGTH)
        sponge.state[: 2 * Digest.LEN] = [*left.values(), *right.values()]
        sponge.permutation()
        return Digest(tuple(sponge.state[: Digest.LEN]))

    @classmethod
    def hash_varlen(cls, elements: Iterable[BFieldElement]) -> Digest:
        """Hash a sequence of any length, with padding."""
        sponge = cls.init()
        sponge.pad_and_absorb_all(elements)
        return Digest(tuple(sponge.state[: Digest.LEN]))