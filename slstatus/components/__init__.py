"""Components that each produce one piece of system information as text."""