"""Fixed data for the cube cipher: the initial second cube key and turn tables."""

from __future__ import annotations

__all__ = [
    "KEY_M_CUBE_2_INITIAL_STR",
    "KEY_M_CUBE_2_INITIAL",
    "CUBE_CELLS",
    "QUICK_ROTATE",
]

CUBE_CELLS = 216
"""Number of cells in each turn table (six faces of six by six)."""


def _decimal(text: str) -> int:
    """Parse a string of decimal digits, rejecting anything else."""
    if not text or not text.isdigit():
        raise ValueError(f"not a decimal digit string: {text[:20]!r}")
    return int(text)


def _table(text: str) -> tuple[int, ...]:
    """Parse a whitespace-separated cell ordering and check it is a permutation."""
    values = tuple(int(token) for token in text.split())
    if len(values) != CUBE_CELLS:
        raise ValueError(f"turn table has {len(values)} cells, expected {CUBE_CELLS}")
    if sorted(values) != list(range(1, CUBE_CELLS + 1)):
        raise ValueError("turn table is not a permutation of 1..216")
    return values


KEY_M_CUBE_2_INITIAL_STR = (
    "59565132447053049287869018311009801607303898421111907551297894080632720834470088725850"
    "92223832744749764743463322751461207476013585191844116513684273632949606212974952252094"
    "69436162769979646429343219166645902602109235747691222145379473991432534557471479289672"
    "56288057276354325988258488527776100832695695198052703397783630437815514435212615274776"
    "47980671474130675633169704734531961949876483611609412945853577808392325595894632136921"
    "27866770031791169732740857501063000971615544066835713776450047274810567584286718709493"
    "36"
)
"""Decimal digits of the starting value of the second cube key."""

KEY_M_CUBE_2_INITIAL = _decimal(KEY_M_CUBE_2_INITIAL_STR)
"""The starting value of the second cube key as an integer."""

QUICK_ROTATE: tuple[tuple[int, ...], ...] = (
    _table(
        "180 2 3 4 5 6 174 8 9 10 11 12 168 14 15 16 17 18 162 20 21 22 23 "
        "24 156 26 27 28 29 30 150 32 33 34 35 36 67 61 55 49 43 37 68 62 56 "
        "50 44 38 69 63 57 51 45 39 70 64 58 52 46 40 71 65 59 53 47 41 72 66 "
        "60 54 48 42 1 74 75 76 77 78 7 80 81 82 83 84 13 86 87 88 89 90 19 "
        "92 93 94 95 96 25 98 99 100 101 102 31 104 105 106 107 108 109 110 111 "
        "112 113 114 115 116 117 118 119 120 121 122 123 124 125 126 127 128 129 "
        "130 131 132 133 134 135 136 137 138 139 140 141 142 143 144 145 146 147 "
        "148 149 211 151 152 153 154 155 205 157 158 159 160 161 199 163 164 165 "
        "166 167 193 169 170 171 172 173 187 175 176 177 178 179 181 73 182 183 "
        "184 185 186 79 188 189 190 191 192 85 194 195 196 197 198 91 200 201 202 "
        "203 204 97 206 207 208 209 210 103 212 213 214 215 216"
    ),
    _table(
        "180 2 3 4 5 6 174 8 9 10 11 12 168 14 15 16 17 18 162 20 21 22 23 "
        "24 156 26 27 28 29 30 42 41 40 39 38 37 67 61 55 49 43 73 68 62 56 "
        "50 44 182 69 63 57 51 45 183 70 64 58 52 46 184 71 65 59 53 47 185 72 "
        "66 60 54 48 186 31 25 19 13 7 1 104 98 92 86 80 74 105 99 93 87 81 "
        "75 106 100 94 88 82 76 107 101 95 89 83 77 108 102 96 90 84 78 150 110 "
        "111 112 113 114 32 116 117 118 119 120 33 122 123 124 125 126 34 128 129 "
        "130 131 132 35 134 135 136 137 138 36 140 141 142 143 144 145 146 147 "
        "148 149 211 151 152 153 154 155 205 157 158 159 160 161 199 163 164 165 "
        "166 167 193 169 170 171 172 173 187 175 176 177 178 179 181 139 133 127 "
        "121 115 109 79 188 189 190 191 192 85 194 195 196 197 198 91 200 201 202 "
        "203 204 97 206 207 208 209 210 103 212 213 214 215 216"
    ),
    _table(
        "6 12 18 24 30 37 5 11 17 23 29 38 4 10 16 22 28 39 3 9 15 21 27 40 "
        "2 8 14 20 26 41 180 174 168 162 156 42 67 61 55 49 43 73 68 62 56 50 "
        "44 182 69 63 57 51 45 183 70 64 58 52 46 184 71 65 59 53 47 185 175 "
        "176 177 178 179 181 31 25 19 13 7 1 104 98 92 86 80 74 105 99 93 87 "
        "81 75 106 100 94 88 82 76 107 101 95 89 83 77 72 66 60 54 48 186 150 "
        "110 111 112 113 114 32 116 117 118 119 120 33 122 123 124 125 126 34 128 "
        "129 130 131 132 35 134 135 136 137 138 108 102 96 90 84 78 145 146 147 "
        "148 149 211 151 152 153 154 155 205 157 158 159 160 161 199 163 164 165 "
        "166 167 193 169 170 171 172 173 187 36 140 141 142 143 144 139 133 127 "
        "121 115 109 79 188 189 190 191 192 85 194 195 196 197 198 91 200 201 202 "
        "203 204 97 206 207 208 209 210 103 212 213 214 215 216"
    ),
    _table(
        "6 143 18 24 30 37 5 173 17 23 29 38 4 167 16 22 28 39 3 161 15 21 27 "
        "40 2 155 14 20 26 41 180 149 168 162 156 42 67 61 55 49 43 73 68 62 "
        "56 50 44 182 69 63 57 51 45 183 70 64 58 52 46 184 71 65 59 53 47 185 "
        "175 176 177 178 179 181 31 12 19 13 7 1 104 11 92 86 80 74 105 10 93 "
        "87 81 75 106 9 94 88 82 76 107 8 95 89 83 77 72 174 60 54 48 186 150 "
        "110 111 112 113 114 32 116 117 118 119 120 33 122 123 124 125 126 34 128 "
        "129 130 131 132 35 134 135 136 137 138 108 102 96 90 84 78 145 146 147 "
        "148 212 211 151 152 153 154 206 205 157 158 159 160 200 199 163 164 165 "
        "166 194 193 169 170 171 172 188 187 36 140 141 142 133 144 139 25 127 "
        "121 115 109 79 98 189 190 191 192 85 99 195 196 197 198 91 100 201 202 "
        "203 204 97 101 207 208 209 210 103 66 213 214 215 216"
    ),
    _table(
        "6 143 18 24 30 37 5 173 17 23 29 38 4 167 16 22 28 39 3 161 15 21 27 "
        "40 179 47 46 45 44 43 180 149 168 162 156 42 67 61 55 49 79 73 68 62 "
        "56 50 98 182 69 63 57 51 189 183 70 64 58 52 190 184 71 65 59 53 191 "
        "185 175 176 177 178 192 181 31 12 19 13 7 1 104 11 92 86 80 74 105 10 "
        "93 87 81 75 106 9 94 88 82 76 107 8 95 89 83 77 72 174 60 54 48 186 "
        "150 2 111 112 113 114 32 155 117 118 119 120 33 14 123 124 125 126 34 "
        "20 129 130 131 132 35 26 135 136 137 138 108 41 96 90 84 78 145 146 147 "
        "148 212 211 151 152 153 154 206 205 157 158 159 160 200 199 163 164 165 "
        "166 194 193 169 170 171 172 188 187 36 140 141 142 133 144 139 25 127 "
        "121 115 109 102 134 128 122 116 110 85 99 195 196 197 198 91 100 201 202 "
        "203 204 97 101 207 208 209 210 103 66 213 214 215 216"
    ),
    _table(
        "6 143 18 24 30 37 5 173 17 23 29 38 4 167 16 22 28 39 3 161 15 21 27 "
        "40 179 47 46 45 44 43 180 149 168 162 156 42 67 61 55 49 79 73 68 62 "
        "56 50 98 182 69 63 57 51 189 183 70 64 58 52 190 184 169 170 171 172 "
        "188 187 175 176 177 178 192 181 31 12 19 13 7 1 104 11 92 86 80 74 105 "
        "10 93 87 81 75 106 9 94 88 82 76 71 65 59 53 191 185 72 174 60 54 48 "
        "186 150 2 111 112 113 114 32 155 117 118 119 120 33 14 123 124 125 126 "
        "34 20 129 130 131 132 107 8 95 89 83 77 108 41 96 90 84 78 145 146 147 "
        "148 212 211 151 152 153 154 206 205 157 158 159 160 200 199 163 164 165 "
        "166 194 193 35 26 135 136 137 138 36 140 141 142 133 144 139 25 127 121 "
        "115 109 102 134 128 122 116 110 85 99 195 196 197 198 91 100 201 202 203 "
        "204 97 101 207 208 209 210 103 66 213 214 215 216"
    ),
    _table(
        "6 143 142 24 30 37 5 173 136 23 29 38 4 167 166 22 28 39 3 161 160 21 "
        "27 40 179 47 154 45 44 43 180 149 148 162 156 42 67 61 55 49 79 73 68 "
        "62 56 50 98 182 69 63 57 51 189 183 70 64 58 52 190 184 169 170 171 "
        "172 188 187 175 176 177 178 192 181 31 12 18 13 7 1 104 11 17 86 80 74 "
        "105 10 16 87 81 75 106 9 15 88 82 76 71 65 46 53 191 185 72 174 168 "
        "54 48 186 150 2 111 112 113 114 32 155 117 118 119 120 33 14 123 124 "
        "125 126 34 20 129 130 131 132 107 8 95 89 83 77 108 41 96 90 84 78 145 "
        "146 147 213 212 211 151 152 153 207 206 205 157 158 159 201 200 199 163 "
        "164 165 195 194 193 35 26 135 128 137 138 36 140 141 127 133 144 139 25 "
        "19 121 115 109 102 134 92 122 116 110 85 99 93 196 197 198 91 100 94 "
        "202 203 204 97 101 59 208 209 210 103 66 60 214 215 216"
    ),
    _table(
        "6 143 142 24 30 37 5 173 136 23 29 38 4 167 166 22 28 39 178 172 52 "
        "51 50 49 179 47 154 45 44 43 180 149 148 162 156 42 67 61 55 85 79 73 "
        "68 62 56 99 98 182 69 63 57 93 189 183 70 64 58 196 190 184 169 170 "
        "171 197 188 187 175 176 177 198 192 181 31 12 18 13 7 1 104 11 17 86 "
        "80 74 105 10 16 87 81 75 106 9 15 88 82 76 71 65 46 53 191 185 72 174 "
        "168 54 48 186 150 2 3 112 113 114 32 155 161 118 119 120 33 14 160 124 "
        "125 126 34 20 21 130 131 132 107 8 27 89 83 77 108 41 40 90 84 78 145 "
        "146 147 213 212 211 151 152 153 207 206 205 157 158 159 201 200 199 163 "
        "164 165 195 194 193 35 26 135 128 137 138 36 140 141 127 133 144 139 25 "
        "19 121 115 109 102 134 92 122 116 110 96 95 129 123 117 111 91 100 94 "
        "202 203 204 97 101 59 208 209 210 103 66 60 214 215 216"
    ),
    _table(
        "6 143 142 24 30 37 5 173 136 23 29 38 4 167 166 22 28 39 178 172 52 "
        "51 50 49 179 47 154 45 44 43 180 149 148 162 156 42 67 61 55 85 79 73 "
        "68 62 56 99 98 182 69 63 57 93 189 183 163 164 165 195 194 193 169 170 "
        "171 197 188 187 175 176 177 198 192 181 31 12 18 13 7 1 104 11 17 86 "
        "80 74 105 10 16 87 81 75 70 64 58 196 190 184 71 65 46 53 191 185 72 "
        "174 168 54 48 186 150 2 3 112 113 114 32 155 161 118 119 120 33 14 160 "
        "124 125 126 106 9 15 88 82 76 107 8 27 89 83 77 108 41 40 90 84 78 "
        "145 146 147 213 212 211 151 152 153 207 206 205 157 158 159 201 200 199 "
        "34 20 21 130 131 132 35 26 135 128 137 138 36 140 141 127 133 144 139 "
        "25 19 121 115 109 102 134 92 122 116 110 96 95 129 123 117 111 91 100 "
        "94 202 203 204 97 101 59 208 209 210 103 66 60 214 215 216"
    ),
    _table(
        "6 143 142 141 30 37 5 173 136 135 29 38 4 167 166 21 28 39 178 172 52 "
        "159 50 49 179 47 154 153 44 43 180 149 148 147 156 42 67 61 55 85 79 "
        "73 68 62 56 99 98 182 69 63 57 93 189 183 163 164 165 195 194 193 169 "
        "170 171 197 188 187 175 176 177 198 192 181 31 12 18 24 7 1 104 11 17 "
        "23 80 74 105 10 16 22 81 75 70 64 58 51 190 184 71 65 46 45 191 185 "
        "72 174 168 162 48 186 150 2 3 112 113 114 32 155 161 118 119 120 33 14 "
        "160 124 125 126 106 9 15 88 82 76 107 8 27 89 83 77 108 41 40 90 84 "
        "78 145 146 214 213 212 211 151 152 208 207 206 205 157 158 202 201 200 "
        "199 34 20 123 130 131 132 35 26 122 128 137 138 36 140 121 127 133 144 "
        "139 25 19 13 115 109 102 134 92 86 116 110 96 95 129 87 117 111 91 100 "
        "94 196 203 204 97 101 59 53 209 210 103 66 60 54 215 216"
    ),
    _table(
        "6 143 142 141 30 37 5 173 136 135 29 38 177 171 165 57 56 55 178 172 "
        "52 159 50 49 179 47 154 153 44 43 180 149 148 147 156 42 67 61 91 85 "
        "79 73 68 62 100 99 98 182 69 63 94 93 189 183 163 164 196 195 194 193 "
        "169 170 203 197 188 187 175 176 204 198 192 181 31 12 18 24 7 1 104 11 "
        "17 23 80 74 105 10 16 22 81 75 70 64 58 51 190 184 71 65 46 45 191 "
        "185 72 174 168 162 48 186 150 2 3 4 113 114 32 155 161 167 119 120 33 "
        "14 160 166 125 126 106 9 15 21 82 76 107 8 27 28 83 77 108 41 40 39 "
        "84 78 145 146 214 213 212 211 151 152 208 207 206 205 157 158 202 201 "
        "200 199 34 20 123 130 131 132 35 26 122 128 137 138 36 140 121 127 133 "
        "144 139 25 19 13 115 109 102 134 92 86 116 110 96 95 129 87 117 111 90 "
        "89 88 124 118 112 97 101 59 53 209 210 103 66 60 54 215 216"
    ),
    _table(
        "6 143 142 141 30 37 5 173 136 135 29 38 177 171 165 57 56 55 178 172 "
        "52 159 50 49 179 47 154 153 44 43 180 149 148 147 156 42 67 61 91 85 "
        "79 73 68 62 100 99 98 182 157 158 202 201 200 199 163 164 196 195 194 "
        "193 169 170 203 197 188 187 175 176 204 198 192 181 31 12 18 24 7 1 104 "
        "11 17 23 80 74 69 63 94 93 189 183 70 64 58 51 190 184 71 65 46 45 "
        "191 185 72 174 168 162 48 186 150 2 3 4 113 114 32 155 161 167 119 120 "
        "105 10 16 22 81 75 106 9 15 21 82 76 107 8 27 28 83 77 108 41 40 39 "
        "84 78 145 146 214 213 212 211 151 152 208 207 206 205 33 14 160 166 125 "
        "126 34 20 123 130 131 132 35 26 122 128 137 138 36 140 121 127 133 144 "
        "139 25 19 13 115 109 102 134 92 86 116 110 96 95 129 87 117 111 90 89 "
        "88 124 118 112 97 101 59 53 209 210 103 66 60 54 215 216"
    ),
    _table(
        "6 143 142 141 140 37 5 173 136 135 26 38 177 171 165 57 20 55 178 172 "
        "52 159 14 49 179 47 154 153 152 43 180 149 148 147 146 42 67 61 91 85 "
        "79 73 68 62 100 99 98 182 157 158 202 201 200 199 163 164 196 195 194 "
        "193 169 170 203 197 188 187 175 176 204 198 192 181 31 12 18 24 30 1 "
        "104 11 17 23 29 74 69 63 94 93 56 183 70 64 58 51 50 184 71 65 46 45 "
        "44 185 72 174 168 162 156 186 150 2 3 4 113 114 32 155 161 167 119 120 "
        "105 10 16 22 81 75 106 9 15 21 82 76 107 8 27 28 83 77 108 41 40 39 "
        "84 78 145 215 214 213 212 211 151 209 208 207 206 205 33 118 160 166 125 "
        "126 34 117 123 130 131 132 35 116 122 128 137 138 36 115 121 127 133 144 "
        "139 25 19 13 7 109 102 134 92 86 80 110 96 95 129 87 189 111 90 89 88 "
        "124 190 112 97 101 59 53 191 210 103 66 60 54 48 216"
    ),
    _table(
        "6 143 142 141 140 37 176 170 164 158 62 61 177 171 165 57 20 55 178 172 "
        "52 159 14 49 179 47 154 153 152 43 180 149 148 147 146 42 67 97 91 85 "
        "79 73 68 101 100 99 98 182 157 59 202 201 200 199 163 53 196 195 194 "
        "193 169 191 203 197 188 187 175 210 204 198 192 181 31 12 18 24 30 1 "
        "104 11 17 23 29 74 69 63 94 93 56 183 70 64 58 51 50 184 71 65 46 45 "
        "44 185 72 174 168 162 156 186 150 2 3 4 5 114 32 155 161 167 173 120 "
        "105 10 16 22 136 75 106 9 15 21 135 76 107 8 27 28 26 77 108 41 40 39 "
        "38 78 145 215 214 213 212 211 151 209 208 207 206 205 33 118 160 166 125 "
        "126 34 117 123 130 131 132 35 116 122 128 137 138 36 115 121 127 133 144 "
        "139 25 19 13 7 109 102 134 92 86 80 110 96 95 129 87 189 111 90 89 88 "
        "124 190 112 84 83 82 81 119 113 103 66 60 54 48 216"
    ),
    _table(
        "6 143 142 141 140 37 176 170 164 158 62 61 177 171 165 57 20 55 178 172 "
        "52 159 14 49 179 47 154 153 152 43 180 149 148 147 146 42 67 97 91 85 "
        "79 73 151 209 208 207 206 205 157 59 202 201 200 199 163 53 196 195 194 "
        "193 169 191 203 197 188 187 175 210 204 198 192 181 31 12 18 24 30 1 68 "
        "101 100 99 98 182 69 63 94 93 56 183 70 64 58 51 50 184 71 65 46 45 "
        "44 185 72 174 168 162 156 186 150 2 3 4 5 114 104 11 17 23 29 74 105 "
        "10 16 22 136 75 106 9 15 21 135 76 107 8 27 28 26 77 108 41 40 39 38 "
        "78 145 215 214 213 212 211 32 155 161 167 173 120 33 118 160 166 125 126 "
        "34 117 123 130 131 132 35 116 122 128 137 138 36 115 121 127 133 144 139 "
        "25 19 13 7 109 102 134 92 86 80 110 96 95 129 87 189 111 90 89 88 124 "
        "190 112 84 83 82 81 119 113 103 66 60 54 48 216"
    ),
    _table(
        "6 143 142 141 140 36 176 170 164 158 62 35 177 171 165 57 20 34 178 172 "
        "52 159 14 33 179 47 154 153 152 32 180 149 148 147 146 145 67 97 91 85 "
        "79 73 151 209 208 207 206 205 157 59 202 201 200 199 163 53 196 195 194 "
        "193 169 191 203 197 188 187 175 210 204 198 192 181 31 12 18 24 30 37 "
        "68 101 100 99 98 61 69 63 94 93 56 55 70 64 58 51 50 49 71 65 46 45 "
        "44 43 72 174 168 162 156 42 108 107 106 105 104 150 41 8 9 10 11 2 40 "
        "27 15 16 17 3 39 28 21 22 23 4 38 26 135 136 29 5 78 77 76 75 74 114 "
        "216 215 214 213 212 211 113 155 161 167 173 120 112 118 160 166 125 126 "
        "111 117 123 130 131 132 110 116 122 128 137 138 109 115 121 127 133 144 "
        "139 25 19 13 7 1 102 134 92 86 80 182 96 95 129 87 189 183 90 89 88 "
        "124 190 184 84 83 82 81 119 185 103 66 60 54 48 186"
    ),
    _table(
        "175 169 163 157 151 67 176 170 164 158 62 35 177 171 165 57 20 34 178 "
        "172 52 159 14 33 179 47 154 153 152 32 180 149 148 147 146 145 103 97 "
        "91 85 79 73 66 209 208 207 206 205 60 59 202 201 200 199 54 53 196 195 "
        "194 193 48 191 203 197 188 187 186 210 204 198 192 181 31 12 18 24 30 "
        "37 68 101 100 99 98 61 69 63 94 93 56 55 70 64 58 51 50 49 71 65 46 "
        "45 44 43 72 174 168 162 156 42 108 107 106 105 104 6 41 8 9 10 11 143 "
        "40 27 15 16 17 142 39 28 21 22 23 141 38 26 135 136 29 140 78 77 76 "
        "75 74 36 109 110 111 112 113 216 115 116 117 118 155 215 121 122 123 160 "
        "161 214 127 128 130 166 167 213 133 137 131 125 173 212 144 138 132 126 "
        "120 211 139 25 19 13 7 1 102 134 92 86 80 182 96 95 129 87 189 183 90 "
        "89 88 124 190 184 84 83 82 81 119 185 114 5 4 3 2 150"
    ),
    _table(
        "175 169 163 157 151 67 176 170 164 158 62 35 177 171 165 57 20 34 178 "
        "172 52 159 14 33 179 47 154 153 152 32 180 149 148 147 146 145 109 110 "
        "111 112 113 216 66 209 208 207 206 205 60 59 202 201 200 199 54 53 196 "
        "195 194 193 48 191 203 197 188 187 186 210 204 198 192 181 103 97 91 85 "
        "79 73 68 101 100 99 98 61 69 63 94 93 56 55 70 64 58 51 50 49 71 65 "
        "46 45 44 43 72 174 168 162 156 42 31 12 18 24 30 37 41 8 9 10 11 143 "
        "40 27 15 16 17 142 39 28 21 22 23 141 38 26 135 136 29 140 78 77 76 "
        "75 74 36 108 107 106 105 104 6 115 116 117 118 155 215 121 122 123 160 "
        "161 214 127 128 130 166 167 213 133 137 131 125 173 212 144 138 132 126 "
        "120 211 1 182 183 184 185 150 7 80 189 190 119 2 13 86 87 124 81 3 19 "
        "92 129 88 82 4 25 134 95 89 83 5 139 102 96 90 84 114"
    ),
)
"""Eighteen cell orderings of a 6x6x6 cube, one per key digit in base 18.

Each entry lists, for every cell position, the 1-based position it is taken from.
"""