"""Binary diagnostic: power consumption and life support rating."""


def parse_numbers(text):
    """Return the whitespace-separated binary readings as ints."""
    return [int(token, 2) for token in text.split()]


def _bit_count(nums, bit):
    return sum(1 for n in nums if n >> bit & 1)


def part1(text, num_bits=12):
    """Gamma rate times epsilon rate."""
    nums = parse_numbers(text)
    half = len(nums) // 2
    gamma = 0
    for bit in range(num_bits):
        if _bit_count(nums, bit) > half:
            gamma |= 1 << bit
    epsilon = ~gamma & ((1 << num_bits) - 1)
    return gamma * epsilon


def _rating(nums, num_bits, keep_common):
    for bit in reversed(range(num_bits)):
        if len(nums) <= 1:
            break
        one = _bit_count(nums, bit) >= len(nums) // 2
        wanted = one if keep_common else not one
        nums = [n for n in nums if bool(n >> bit & 1) == wanted]
    if len(nums) != 1:
        raise ValueError(f"rating search left {len(nums)} readings instead of one")
    return nums[0]


def part2(text, num_bits=12):
    """Oxygen generator rating times CO2 scrubber rating."""
    nums = parse_numbers(text)
    return _rating(nums, num_bits, True) * _rating(nums, num_bits, False)