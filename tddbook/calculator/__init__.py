"""Two-operand expression calculator: engine, validation, parsing, formatting and command line."""