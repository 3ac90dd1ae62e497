"""Small utilities: formatted 8-bit division, sorting, a thread-safe stack and greetings."""