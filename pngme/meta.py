from enum import Enum, auto


class Endianess(Enum):
    '''Every integer of the format is stored big endian.'''
    BIG_ENDIAN = auto()

    @property
    def prefix(self):
        '''The character struct uses for this byte order.'''
        return {
            Endianess.BIG_ENDIAN: '>',
        }[self]
