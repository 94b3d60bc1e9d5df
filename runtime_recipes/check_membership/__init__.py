"""Access control against a set of members, loosely or tightly coupled."""