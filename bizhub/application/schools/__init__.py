"""Schools context: learners, parents, school events and parent consent."""
